"""Graph ports - Abstractions for route data sources.

The network service only needs an ordered list of routes with their
stops; where that list comes from (MBTA API, CSV file, test fixture)
is the adapter's concern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from ..graph.build_graph import Adjacency, StopRoutesIndex

if TYPE_CHECKING:
    from ..domain.models import Route

__all__ = ["Adjacency", "StopRoutesIndex", "TransitDataPort"]


class TransitDataPort(Protocol):
    """Port for loading route/stop listings.

    Implementations:
    - adapters/mbta/client.py (MBTAClient)
    - adapters/graph/csv_repository.py (CSVRouteRepository)
    """

    def list_routes(self) -> Sequence[Route]:
        """Load every route of interest with its ordered stops.

        The returned order must be deterministic: it fixes the edge
        insertion order of the graph and so the choice between
        equally short paths.

        Raises:
            TransitDataError: If the data cannot be obtained or decoded.
        """
        ...
