"""Power grid report library initialization."""

from .models import Plant, PlantType, PlantStatus, Grid
from .config import GridConfig, PlantConfig, LogConfig, default_grid
from .reports import (
    format_plant_report,
    format_grid_report,
    generate_plant_report,
    generate_grid_report
)
from .exceptions import GridReportError

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Plant",
    "PlantType",
    "PlantStatus",
    "Grid",
    "GridConfig",
    "PlantConfig",
    "LogConfig",
    "default_grid",
    "format_plant_report",
    "format_grid_report",
    "generate_plant_report",
    "generate_grid_report",
    "GridReportError"
]
