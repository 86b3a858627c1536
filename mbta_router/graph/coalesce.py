"""Reduction of a stop-level path into a line-level itinerary.

The coalescer walks the path and keeps the set of routes serving
every stop of the current ride. It only switches line when that set
would become empty, so it never changes line while a continuing one
is available. This is a greedy policy, not a proven minimum number
of rides for every topology.

When several routes remain candidates for a ride, the one with the
lexicographically smallest route ID is reported.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, Sequence, Set, Tuple

from ..domain.errors import NoRouteServesStopError
from ..domain.models import Ride


def _routes_at(stop_routes: Mapping[str, Set[str]], stop: str) -> Set[str]:
    routes = stop_routes.get(stop)
    if not routes:
        raise NoRouteServesStopError(
            f"No route serves stop: {stop}",
            stop_name=stop,
        )
    return set(routes)


def _segments(
    path: Sequence[str], stop_routes: Mapping[str, Set[str]]
) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(route_id, first_index, last_index)`` for each ride.

    A ride ends at the last stop its route serves before the break.
    The break stop is not consumed: it opens the next ride with its
    own route set.
    """
    if not path:
        raise ValueError("Cannot coalesce an empty path")

    start = 0
    candidates = _routes_at(stop_routes, path[0])
    for index in range(1, len(path)):
        here = _routes_at(stop_routes, path[index])
        narrowed = candidates & here
        if narrowed:
            candidates = narrowed
            continue

        yield min(candidates), start, index - 1
        start, candidates = index, here
    yield min(candidates), start, len(path) - 1


def coalesce_to_lines(
    path: Sequence[str], stop_routes: Mapping[str, Set[str]]
) -> List[str]:
    """Reduce a stop path to the ordered route IDs a rider takes.

    Parameters
    ----------
    path:
        Stop names as returned by ``shortest_path`` (at least one).
    stop_routes:
        Stop-routes index of the graph the path was found in.

    Returns
    -------
    list[str]
        One route ID per uninterrupted ride.

    Raises
    ------
    NoRouteServesStopError
        If a stop on the path has no serving route.
    ValueError
        If ``path`` is empty.
    """
    return [route_id for route_id, _, _ in _segments(path, stop_routes)]


def split_into_rides(
    path: Sequence[str], stop_routes: Mapping[str, Set[str]]
) -> List[Ride]:
    """Like ``coalesce_to_lines`` but with boarding and alighting stops.

    Each ride after the first is boarded where the previous one ends.
    """
    rides: List[Ride] = []
    for route_id, first, last in _segments(path, stop_routes):
        board = rides[-1].alight if rides else path[first]
        rides.append(Ride(route_id=route_id, board=board, alight=path[last]))
    return rides
