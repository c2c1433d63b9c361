"""Text reports over a grid and its plants."""

import logging
import sys
from typing import List, Optional, TextIO

from .models import Grid

LABEL_WIDTH = 20
GRID_REPORT_TITLE = "Power Grid Report"

logger = logging.getLogger(__name__)


def _header(label: str) -> List[str]:
    return [label, "-" * len(label)]


def _field(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}"


def format_plant_report(grid: Grid) -> str:
    """Render one block per plant, in catalog order, regardless of status."""
    lines: List[str] = []
    for idx, plant in enumerate(grid.plants):
        lines.extend(_header(f"Plant #{idx}"))
        lines.append(_field("Type:", plant.type.value))
        lines.append(_field("Capacty:", f"{plant.capacity:.0f}"))
        lines.append(_field("Status:", plant.status.value))
        lines.append("")
    return "".join(line + "\n" for line in lines)


def format_grid_report(grid: Grid) -> str:
    """Render active capacity, load and utilization for the grid."""
    lines = _header(GRID_REPORT_TITLE)
    lines.append(_field("Capacity: ", f"{grid.active_capacity:.0f}"))
    lines.append(_field("Load: ", f"{grid.load:.0f}"))
    lines.append(_field("Utilization: ", f"{grid.utilization:.2f}%"))
    return "".join(line + "\n" for line in lines)


def generate_plant_report(grid: Grid, out: Optional[TextIO] = None) -> None:
    """Write the plant report to ``out`` (stdout by default)."""
    out = out or sys.stdout
    out.write(format_plant_report(grid))
    logger.debug("Rendered plant report for %d plants", len(grid.plants))


def generate_grid_report(grid: Grid, out: Optional[TextIO] = None) -> None:
    """Write the grid report to ``out`` (stdout by default)."""
    out = out or sys.stdout
    out.write(format_grid_report(grid))
    logger.debug(
        "Rendered grid report: %d of %d plants active",
        len(grid.active_plants), len(grid.plants)
    )
