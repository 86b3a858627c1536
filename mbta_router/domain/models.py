"""Immutable domain models for the transit router.

Stops are identified by their display name throughout: every query
and every structure is keyed by the human-readable name, which is
assumed unique and stable across all routes serving the stop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple


@dataclass(frozen=True, slots=True)
class Route:
    """A transit line with its stops in physical travel order.

    Attributes:
        route_id: Provider identifier (e.g., 'Red', 'Green-B')
        long_name: Human-readable name (e.g., 'Red Line')
        stops: Stop display names in the order the line runs
    """

    route_id: str
    long_name: str
    stops: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def stop_count(self) -> int:
        """Return the number of stops on the route."""
        return len(self.stops)


@dataclass(frozen=True, slots=True)
class TransitGraph:
    """Adjacency structure and stop-routes index built from routes.

    The adjacency lists are multisets: when two routes share a
    segment the edge is stored once per route, so the length of a
    list is not the number of distinct neighbours.

    Attributes:
        adjacency: Stop name -> directly connected stop names
        stop_routes: Stop name -> IDs of the routes serving it
        routes: The routes the graph was built from, in build order
    """

    adjacency: Dict[str, List[str]] = field(default_factory=dict)
    stop_routes: Dict[str, Set[str]] = field(default_factory=dict)
    routes: Tuple[Route, ...] = field(default_factory=tuple)

    def __contains__(self, stop_name: object) -> bool:
        return stop_name in self.stop_routes

    @property
    def is_empty(self) -> bool:
        """Check if the graph has no stops."""
        return not self.stop_routes

    def stop_names(self) -> List[str]:
        """Return every known stop name, sorted."""
        return sorted(self.stop_routes)

    def routes_for(self, stop_name: str) -> Tuple[str, ...]:
        """Return the sorted route IDs serving a stop (empty if unknown)."""
        return tuple(sorted(self.stop_routes.get(stop_name, ())))

    def neighbour_count(self, stop_name: str) -> int:
        """Return the adjacency list length, duplicates included."""
        return len(self.adjacency.get(stop_name, ()))

    def connecting_stops(self) -> Dict[str, Tuple[str, ...]]:
        """Return stops served by two or more routes, sorted by name."""
        return {
            stop: tuple(sorted(route_ids))
            for stop, route_ids in sorted(self.stop_routes.items())
            if len(route_ids) >= 2
        }


@dataclass(frozen=True, slots=True)
class Ride:
    """One uninterrupted ride on a single route."""

    route_id: str
    board: str
    alight: str


@dataclass(frozen=True, slots=True)
class Journey:
    """A planned trip between two stops.

    Attributes:
        path: Stop names from source to destination, inclusive
        lines: Route IDs, one per uninterrupted ride
        rides: Boarding and alighting stop of each ride
    """

    path: Tuple[str, ...]
    lines: Tuple[str, ...]
    rides: Tuple[Ride, ...] = field(default_factory=tuple)

    @property
    def transfer_stops(self) -> Tuple[str, ...]:
        """Return the stops where the rider changes line."""
        return tuple(ride.board for ride in self.rides[1:])

    @property
    def num_stops(self) -> int:
        """Return the number of stops on the path."""
        return len(self.path)

    @property
    def num_hops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.path) - 1, 0)

    @property
    def num_transfers(self) -> int:
        """Return how many times the rider changes line."""
        return max(len(self.lines) - 1, 0)


@dataclass(frozen=True, slots=True)
class RouteStopCount:
    """Stop count of a single route."""

    route_id: str
    long_name: str
    stop_count: int


@dataclass(frozen=True, slots=True)
class StopCountExtremes:
    """Routes with the most and fewest stops.

    Ties are all reported, ordered by route ID.
    """

    most: Tuple[RouteStopCount, ...]
    fewest: Tuple[RouteStopCount, ...]

    @property
    def max_stops(self) -> Optional[int]:
        return self.most[0].stop_count if self.most else None

    @property
    def min_stops(self) -> Optional[int]:
        return self.fewest[0].stop_count if self.fewest else None
