"""Allow ``python -m gridreport``."""

import sys

from .cli import main

sys.exit(main())
