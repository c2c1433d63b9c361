"""Data models for plants and the grid they feed."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import numpy as np

class PlantType(str, Enum):
    """Kinds of generation a plant can provide."""
    HYDRO = "Hydro"
    WIND = "Wind"
    SOLAR = "Solar"

    def __str__(self) -> str:
        return self.value

class PlantStatus(str, Enum):
    """Operational status of a plant."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNAVAILABLE = "Unavailable"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class Plant:
    """A single power generation unit."""
    type: PlantType
    capacity: float  # nominal generation capability
    status: PlantStatus

    @property
    def is_active(self) -> bool:
        """Check if the plant contributes to grid capacity."""
        return self.status is PlantStatus.ACTIVE

@dataclass(frozen=True)
class Grid:
    """Current demand plus the plants available to serve it.

    The load is not bounded by capacity, so utilization may exceed 100%.
    """
    load: float
    plants: Tuple[Plant, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Own a private, immutable copy of the plant sequence
        object.__setattr__(self, "plants", tuple(self.plants))

    @property
    def active_plants(self) -> Tuple[Plant, ...]:
        """Plants whose status is Active, in catalog order."""
        return tuple(p for p in self.plants if p.is_active)

    @property
    def active_capacity(self) -> float:
        """Get total capacity of active plants only."""
        capacities = np.array([p.capacity for p in self.active_plants], dtype=float)
        return float(np.sum(capacities))

    @property
    def utilization(self) -> float:
        """Load as a percentage of active capacity.

        With no active capacity this is ``inf`` (or ``nan`` for zero load)
        rather than an exception.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.divide(np.float64(self.load), np.float64(self.active_capacity))
        return float(ratio * 100)
