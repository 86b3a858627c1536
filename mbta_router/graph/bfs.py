"""Unweighted shortest-path search.

Every hop between adjacent stops costs the same, so a breadth-first
search yields a path with the fewest stops.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Mapping, Sequence

from ..domain.errors import UnknownStopError, UnreachableError


def shortest_path(
    adjacency: Mapping[str, Sequence[str]],
    stop_routes: Mapping[str, object],
    source: str,
    destination: str,
) -> List[str]:
    """Compute the minimum-hop path between two stops.

    Parameters
    ----------
    adjacency:
        Stop name -> connected stop names, as built by ``build_graph``.
    stop_routes:
        Stop-routes index; its keys are the universe of valid stops.
    source:
        Name of the departure stop.
    destination:
        Name of the arrival stop.

    Returns
    -------
    list[str]
        Stops from ``source`` to ``destination`` inclusive. Among
        equally short paths, the one discovered first in adjacency
        insertion order is returned.

    Raises
    ------
    UnknownStopError
        If either stop is not in ``stop_routes``.
    UnreachableError
        If no path connects the two stops.
    """
    for name in (source, destination):
        if name not in stop_routes:
            raise UnknownStopError(f"Unknown stop: {name}", stop_name=name)

    if source == destination:
        return [source]

    parents: Dict[str, str] = {}
    visited = {source}
    frontier: Deque[str] = deque([source])

    while frontier:
        current = frontier.popleft()
        if current == destination:
            break
        for neighbour in adjacency.get(current, ()):
            if neighbour in visited:
                continue
            visited.add(neighbour)
            parents[neighbour] = current
            frontier.append(neighbour)
    else:
        raise UnreachableError(
            f"No path from {source} to {destination}",
            source=source,
            destination=destination,
        )

    path = [destination]
    while path[-1] != source:
        path.append(parents[path[-1]])
    path.reverse()
    return path
