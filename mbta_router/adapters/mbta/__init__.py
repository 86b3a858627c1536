"""MBTA adapters - Route and stop listings from the MBTA v3 API."""

from .client import MBTAClient

__all__ = ["MBTAClient"]
