"""Graph data adapters - Offline route snapshots.

Available implementations:
- CSVRouteRepository: Loads routes and stop sequences from a CSV file
"""

from .csv_repository import CSVRouteRepository

__all__ = ["CSVRouteRepository"]
