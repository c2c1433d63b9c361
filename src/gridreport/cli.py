"""Interactive menu that picks and prints one report."""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from .config import LogConfig, default_grid, setup_logging
from .models import Grid
from .reports import generate_grid_report, generate_plant_report

MENU = (
    "1) Generatee Power Plant Report\n"
    "2) Generatee Power Grid Report\n"
)
PROMPT = "Please choose an option: "
UNKNOWN_REQUEST = "Unknown request, exiting applciation..."

logger = logging.getLogger(__name__)


class MenuOption(str, Enum):
    """Recognised menu choices."""
    PLANT_REPORT = "1"
    GRID_REPORT = "2"


class DispatchState(Enum):
    """States of a single menu interaction."""
    AWAITING_INPUT = "awaiting_input"
    DISPATCHED = "dispatched"
    EXIT = "exit"


def read_option(stdin: TextIO) -> str:
    """Read one line and return its first whitespace-delimited token.

    End of stream, or a line that cannot be read or decoded, yields an
    empty string.
    """
    try:
        line = stdin.readline()
    except (OSError, ValueError) as e:
        logger.info("Could not read menu option: %s", e)
        return ""
    tokens = line.split()
    return tokens[0] if tokens else ""


class ReportMenu:
    """Drives the prompt, the dispatch and the exit of one run."""

    def __init__(
        self,
        grid: Grid,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        self.grid = grid
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.state = DispatchState.AWAITING_INPUT

    def prompt(self) -> str:
        self.stdout.write(MENU)
        self.stdout.write(PROMPT)
        self.stdout.flush()
        return read_option(self.stdin)

    def dispatch(self, option: str) -> None:
        """Run the report for ``option`` or report an unknown request."""
        logger.debug("Menu option selected: %r", option)

        if option == MenuOption.PLANT_REPORT.value:
            self.state = DispatchState.DISPATCHED
            generate_plant_report(self.grid, self.stdout)
        elif option == MenuOption.GRID_REPORT.value:
            self.state = DispatchState.DISPATCHED
            generate_grid_report(self.grid, self.stdout)
        else:
            logger.info("Unknown menu option %r", option)
            self.stdout.write(UNKNOWN_REQUEST + "\n")

        self.state = DispatchState.EXIT

    def run(self) -> None:
        self.dispatch(self.prompt())


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    grid: Optional[Grid] = None,
    log_config: Optional[LogConfig] = None
) -> int:
    """Console entry point; always returns exit status 0."""
    setup_logging(log_config)
    if grid is None:
        grid = default_grid()
    menu = ReportMenu(grid, stdin=stdin, stdout=stdout)
    menu.run()
    return 0
