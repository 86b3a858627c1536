"""MBTA Router - line-level journey planning over a rail network.

The package is organised in layers:

- ``domain``: immutable models and typed errors
- ``graph``: pure graph construction, BFS and line coalescing
- ``ports``: protocols the services depend on
- ``adapters``: MBTA API client, CSV repository, caches
- ``services``: network queries used by the CLI
"""

__version__ = "0.1.0"
