"""Application wiring.

Selects the route data adapter from configuration and builds the
network service on top of it. Tests construct the service directly
with a fake data source instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import AppConfig, get_config
from .ports.graph import TransitDataPort
from .services import TransitNetworkService


def create_data_source(
    config: Optional[AppConfig] = None, csv_path: Optional[Path] = None
) -> TransitDataPort:
    """Create the route data adapter selected by configuration.

    Args:
        config: Optional configuration override.
        csv_path: Forces the CSV repository on this file.

    Returns:
        A TransitDataPort implementation.
    """
    config = config or get_config()

    if csv_path is not None or config.data.source == "csv":
        from .adapters.graph import CSVRouteRepository

        return CSVRouteRepository(csv_path or config.data.csv_path)

    from .adapters.mbta import MBTAClient

    return MBTAClient(config.api)


def create_service(
    config: Optional[AppConfig] = None, csv_path: Optional[Path] = None
) -> TransitNetworkService:
    """Create a network service with the configured data source."""
    return TransitNetworkService(create_data_source(config, csv_path))
