"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the network service and the
adapters that feed it route data or cache provider responses.
"""

from .cache import CachePort
from .graph import Adjacency, StopRoutesIndex, TransitDataPort

__all__ = [
    # Graph
    "Adjacency",
    "StopRoutesIndex",
    "TransitDataPort",
    # Cache
    "CachePort",
]
