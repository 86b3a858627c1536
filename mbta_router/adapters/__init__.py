"""Adapters layer - Concrete implementations of ports.

- MBTA v3 API client (route and stop listings over HTTP)
- CSV route repository (offline snapshots, tests)
- Caching (in-memory, null)
"""
