"""
Configuration management for the power grid report.
Describes a grid as plain data that can be validated, saved and loaded.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json
import logging
import os

import yaml

from .exceptions import ConfigurationError, PlantCategoryError, ValidationError
from .models import Grid, Plant, PlantStatus, PlantType
from .validation import GridValidator, PlantValidator, validate_enum_value

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


class ConfigFormat(Enum):
    """Supported configuration file formats."""
    YAML = "yaml"
    JSON = "json"


@dataclass
class ConfigValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add a validation error."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a validation warning."""
        self.warnings.append(message)


@dataclass
class LogConfig:
    """Configuration for diagnostics logging."""
    level: str = "WARNING"
    log_file: Optional[str] = None

    def validate(self) -> ConfigValidationResult:
        """Validate logging configuration."""
        result = ConfigValidationResult(is_valid=True)

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level not in valid_log_levels:
            result.add_error(f"Invalid log level: {self.level}")

        return result


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Setup the package logger; handlers go to stderr, never stdout.

    Without an explicit ``config`` an already configured logger is left
    untouched, so callers keep whatever level they chose.
    """
    package_logger = logging.getLogger("gridreport")
    if config is None and package_logger.handlers:
        return package_logger
    config = config or LogConfig()

    result = config.validate()
    if not result.is_valid:
        raise ConfigurationError(
            "Invalid logging configuration: " + "; ".join(result.errors)
        )

    package_logger.setLevel(getattr(logging, config.level))
    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    if not any(type(h) is logging.StreamHandler for h in package_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    # File handler if specified, once per file
    if config.log_file:
        log_path = os.path.abspath(config.log_file)
        if not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in package_logger.handlers
        ):
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    return package_logger


@dataclass
class PlantConfig:
    """Configuration for an individual plant."""
    type: str
    capacity: float
    status: str = PlantStatus.ACTIVE.value

    def validate(self) -> ConfigValidationResult:
        """Validate plant configuration."""
        result = ConfigValidationResult(is_valid=True)

        try:
            validate_enum_value(self.type, PlantType)
        except PlantCategoryError as e:
            result.add_error(str(e))

        try:
            validate_enum_value(self.status, PlantStatus)
        except PlantCategoryError as e:
            result.add_error(str(e))

        try:
            PlantValidator.validate_capacity(self.capacity)
        except ValidationError as e:
            result.add_error(f"capacity: {e}")

        return result

    def build_plant(self) -> Plant:
        """Create the plant record this configuration describes."""
        return Plant(
            type=validate_enum_value(self.type, PlantType),
            capacity=float(self.capacity),
            status=validate_enum_value(self.status, PlantStatus)
        )


@dataclass
class GridConfig:
    """Main grid configuration: the load and the plant catalog."""

    name: str = "Power Grid"
    load: float = 0.0
    plants: List[PlantConfig] = field(default_factory=list)
    logging: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> ConfigValidationResult:
        """Validate the entire grid configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.name:
            result.add_error("Grid name cannot be empty")

        try:
            GridValidator.validate_load(self.load)
        except ValidationError as e:
            result.add_error(f"load: {e}")

        log_result = self.logging.validate()
        for error in log_result.errors:
            result.add_error(f"logging: {error}")

        active_capacity = 0.0
        for index, plant in enumerate(self.plants):
            plant_result = plant.validate()

            # Prefix errors with the plant's catalog index
            for error in plant_result.errors:
                result.add_error(f"plant #{index}: {error}")
            for warning in plant_result.warnings:
                result.add_warning(f"plant #{index}: {warning}")

            if plant_result.is_valid and plant.build_plant().is_active:
                active_capacity += float(plant.capacity)

        if result.is_valid:
            if active_capacity == 0:
                result.add_warning("No active capacity: utilization is undefined")
            elif self.load > active_capacity:
                result.add_warning(
                    f"Load {self.load} exceeds active capacity {active_capacity}"
                )

        return result

    def build_grid(self) -> Grid:
        """Validate and create the grid this configuration describes."""
        result = self.validate()
        if not result.is_valid:
            raise ConfigurationError(
                "Invalid grid configuration: " + "; ".join(result.errors)
            )
        for warning in result.warnings:
            logger.warning("%s: %s", self.name, warning)

        return Grid(
            load=float(self.load),
            plants=[plant.build_plant() for plant in self.plants]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "name": self.name,
            "load": self.load,
            "plants": [
                {
                    "type": plant.type,
                    "capacity": plant.capacity,
                    "status": plant.status
                }
                for plant in self.plants
            ],
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GridConfig':
        """Create configuration from dictionary."""
        if not isinstance(data, dict):
            raise ConfigurationError("Grid configuration must be a mapping")

        try:
            plants = [
                PlantConfig(
                    type=plant_data["type"],
                    capacity=plant_data["capacity"],
                    status=plant_data.get("status", PlantStatus.ACTIVE.value)
                )
                for plant_data in data.get("plants", [])
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ConfigurationError(f"Malformed plant entry: {e}") from e

        logging_data = data.get("logging", {}) or {}
        if not isinstance(logging_data, dict):
            raise ConfigurationError(
                f"Malformed logging entry: expected a mapping, got {type(logging_data).__name__}"
            )

        return cls(
            name=data.get("name", "Power Grid"),
            load=data.get("load", 0.0),
            plants=plants,
            logging=LogConfig(
                level=logging_data.get("level", "WARNING"),
                log_file=logging_data.get("log_file")
            )
        )

    @classmethod
    def from_grid(cls, grid: Grid, name: str = "Power Grid") -> 'GridConfig':
        """Describe an existing grid as configuration."""
        return cls(
            name=name,
            load=grid.load,
            plants=[
                PlantConfig(
                    type=plant.type.value,
                    capacity=plant.capacity,
                    status=plant.status.value
                )
                for plant in grid.plants
            ]
        )

    def save_to_file(self, file_path: Union[str, Path], format: ConfigFormat = ConfigFormat.YAML) -> None:
        """Save configuration to file."""
        file_path = Path(file_path)
        data = self.to_dict()

        if format == ConfigFormat.YAML:
            with open(file_path, 'w') as f:
                yaml.dump(data, f, default_flow_style=False, indent=2, sort_keys=False)
        elif format == ConfigFormat.JSON:
            with open(file_path, 'w') as f:
                json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> 'GridConfig':
        """Load configuration from file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        if file_path.suffix.lower() in ['.yaml', '.yml']:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f)
        elif file_path.suffix.lower() == '.json':
            with open(file_path, 'r') as f:
                data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {file_path.suffix}")

        return cls.from_dict(data)


# Built-in demo catalog
DEFAULT_CATALOG: Dict[str, Any] = {
    "name": "Demo Grid",
    "load": 300,
    "plants": [
        {"type": "Hydro", "capacity": 300, "status": "Active"},
        {"type": "Wind", "capacity": 30, "status": "Active"},
        {"type": "Wind", "capacity": 25, "status": "Inactive"},
        {"type": "Wind", "capacity": 35, "status": "Active"},
        {"type": "Solar", "capacity": 45, "status": "Unavailable"},
        {"type": "Solar", "capacity": 40, "status": "Inactive"},
    ],
}


def default_grid() -> Grid:
    """Build the demo grid: load 300 served by six plants."""
    return GridConfig.from_dict(DEFAULT_CATALOG).build_grid()
