"""Graph construction from ordered route listings.

This module defines the adjacency and stop-routes types used
throughout the project and builds them from a sequence of routes.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from ..domain.models import Route, TransitGraph

Adjacency = Dict[str, List[str]]
StopRoutesIndex = Dict[str, Set[str]]

logger = logging.getLogger(__name__)


def build_graph(routes: Iterable[Route]) -> TransitGraph:
    """Build the undirected stop graph and the stop-routes index.

    Parameters
    ----------
    routes:
        Routes with their stops in travel order. The order of the
        routes, and of the stops within each route, fixes the edge
        insertion order and therefore BFS tie-breaking.

    Returns
    -------
    TransitGraph
        Adjacency lists (edges mirrored, duplicates kept) and the set
        of route IDs serving each stop.
    """
    adjacency: Adjacency = {}
    stop_routes: StopRoutesIndex = {}
    kept: List[Route] = []
    edges = 0

    for route in routes:
        kept.append(route)
        for stop in route.stops:
            adjacency.setdefault(stop, [])
            stop_routes.setdefault(stop, set()).add(route.route_id)

        for here, there in zip(route.stops, route.stops[1:]):
            adjacency[here].append(there)
            adjacency[there].append(here)
            edges += 1

    logger.debug(
        "Graph built",
        extra={"routes": len(kept), "stops": len(stop_routes), "edges": edges},
    )
    return TransitGraph(adjacency=adjacency, stop_routes=stop_routes, routes=tuple(kept))
