"""Typed domain errors for the transit router.

Every anomaly (unknown stop, disconnected stops, bad provider data)
is raised as one of these errors so that the outermost layer decides
whether to abort, retry or report and continue.

All errors inherit from TransitRouterError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TransitRouterError(Exception):
    """Base error for the transit router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownStopError(TransitRouterError):
    """A query referenced a stop absent from the data set.

    Attributes:
        stop_name: The stop name that was not found
    """

    stop_name: str = ""


@dataclass
class UnreachableError(TransitRouterError):
    """Both stops exist but lie in disjoint parts of the network.

    Attributes:
        source: Departure stop name
        destination: Arrival stop name
    """

    source: str = ""
    destination: str = ""


@dataclass
class NoRouteServesStopError(TransitRouterError):
    """A stop on a path has no associated route (data integrity).

    Attributes:
        stop_name: The stop without any serving route
    """

    stop_name: str = ""


@dataclass
class TransitDataError(TransitRouterError):
    """Fetching or decoding route/stop data failed.

    Attributes:
        url: Request URL or file path involved, if any
        status_code: HTTP status code when the provider answered
    """

    url: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class ConfigurationError(TransitRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
