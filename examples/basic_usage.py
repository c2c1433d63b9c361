"""
Basic usage example of the power grid report library.
This example demonstrates:
- Describing a grid as configuration
- Validating it and saving it to YAML
- Rendering both reports
"""

from pathlib import Path

from gridreport import GridConfig, PlantConfig, LogConfig
from gridreport.config import ConfigFormat, setup_logging
from gridreport.reports import generate_grid_report, generate_plant_report


def main():
    config = GridConfig(
        name="Basic Grid Example",
        load=120,
        plants=[
            PlantConfig(type="Hydro", capacity=80, status="Active"),
            PlantConfig(type="Wind", capacity=60, status="Active"),
            PlantConfig(type="Solar", capacity=50, status="Unavailable"),
        ],
        logging=LogConfig(level="INFO"),
    )
    setup_logging(config.logging)

    result = config.validate()
    print(f"Configuration valid: {result.is_valid}")
    for warning in result.warnings:
        print(f"Warning: {warning}")

    path = Path("basic_grid.yaml")
    config.save_to_file(path, ConfigFormat.YAML)
    print(f"Saved configuration to {path}\n")

    grid = GridConfig.load_from_file(path).build_grid()
    generate_plant_report(grid)
    generate_grid_report(grid)


if __name__ == "__main__":
    main()
