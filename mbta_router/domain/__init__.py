"""Domain layer - Core transit models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    NoRouteServesStopError,
    TransitDataError,
    TransitRouterError,
    UnknownStopError,
    UnreachableError,
)
from .models import (
    Journey,
    Ride,
    Route,
    RouteStopCount,
    StopCountExtremes,
    TransitGraph,
)

__all__ = [
    # Models
    "Route",
    "TransitGraph",
    "Journey",
    "Ride",
    "RouteStopCount",
    "StopCountExtremes",
    # Errors
    "TransitRouterError",
    "UnknownStopError",
    "UnreachableError",
    "NoRouteServesStopError",
    "TransitDataError",
    "ConfigurationError",
]
