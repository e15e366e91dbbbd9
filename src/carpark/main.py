"""Main application entry point."""

import logging
from pathlib import Path
from typing import Optional

from .config import AppConfig, LoggingConfig, get_config_path, load_config
from .reports.formatting import render_slot_table
from .service import CarParkService
from .state.car_park import CarPark

logger = logging.getLogger(__name__)


def setup_logging(config: LoggingConfig) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=config.level, format=config.format)


def build_service(config: AppConfig) -> CarParkService:
    """Create the car park and the service operating on it."""
    car_park = CarPark.from_config(config.car_park)
    return CarParkService(car_park, hourly_rate=config.fees.hourly_rate)


def main(config_path: Optional[str | Path] = None) -> None:
    """
    Set up a car park from configuration and print its slots.

    Falls back to default settings when no configuration file exists.
    """
    path = Path(config_path) if config_path else get_config_path()
    config = load_config(path) if path.exists() else AppConfig()

    setup_logging(config.logging)
    if path.exists():
        logger.info(f"Loaded configuration from {path}")
    else:
        logger.info(f"No configuration at {path}, using defaults")

    service = build_service(config)
    print(
        f"Car park created with {config.car_park.staff_slots} staff slots and "
        f"{config.car_park.visitor_slots} visitor slots."
    )
    print(render_slot_table(service.list_slots()))


if __name__ == "__main__":
    main()
