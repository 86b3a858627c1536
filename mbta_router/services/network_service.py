"""Transit network service - Main orchestrator.

Loads the routes once per session from a TransitDataPort, builds the
graph and answers the questions the CLI asks: which routes serve a
stop, route stop-count extremes, interchange stops and journeys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..domain.errors import (
    NoRouteServesStopError,
    TransitRouterError,
    UnknownStopError,
    UnreachableError,
)
from ..domain.models import (
    Journey,
    RouteStopCount,
    StopCountExtremes,
    TransitGraph,
)
from ..graph import build_graph, coalesce_to_lines, shortest_path
from ..graph.coalesce import split_into_rides
from ..ports.graph import TransitDataPort


@dataclass
class TransitNetworkService:
    """Service answering routing questions over one network snapshot.

    Attributes:
        data_source: Provides the routes the graph is built from
    """

    data_source: TransitDataPort

    _graph: Optional[TransitGraph] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self) -> TransitGraph:
        """Return the network graph, building it on first use.

        Raises:
            TransitDataError: If the routes cannot be loaded.
        """
        if self._graph is None:
            routes = self.data_source.list_routes()
            self._graph = build_graph(routes)
            self._logger.info(
                "Network graph ready",
                extra={"routes": len(routes), "stops": len(self._graph.stop_routes)},
            )
        return self._graph

    def refresh(self) -> TransitGraph:
        """Discard the current graph and rebuild it from the data source."""
        self._graph = None
        return self.graph()

    def route_names(self) -> List[Tuple[str, str]]:
        """Return ``(route_id, long_name)`` in build order."""
        return [(route.route_id, route.long_name) for route in self.graph().routes]

    def stop_names(self) -> List[str]:
        return self.graph().stop_names()

    def routes_serving(self, stop_name: str) -> Tuple[str, ...]:
        """Return the sorted IDs of the routes serving a stop.

        Raises:
            UnknownStopError: If the stop is not in the network.
        """
        graph = self.graph()
        if stop_name not in graph:
            raise UnknownStopError(f"Unknown stop: {stop_name}", stop_name=stop_name)
        return graph.routes_for(stop_name)

    def stop_count_extremes(self) -> Optional[StopCountExtremes]:
        """Return the routes with the most and fewest stops.

        Returns None when the network has no routes.
        """
        counts = sorted(
            (
                RouteStopCount(route.route_id, route.long_name, route.stop_count)
                for route in self.graph().routes
            ),
            key=lambda count: count.route_id,
        )
        if not counts:
            return None

        most = max(count.stop_count for count in counts)
        fewest = min(count.stop_count for count in counts)
        return StopCountExtremes(
            most=tuple(c for c in counts if c.stop_count == most),
            fewest=tuple(c for c in counts if c.stop_count == fewest),
        )

    def connecting_stops(self) -> Dict[str, Tuple[str, ...]]:
        """Return interchange stops and the routes meeting there."""
        return self.graph().connecting_stops()

    def plan(self, source: str, destination: str) -> Journey:
        """Plan the fewest-stops journey and its line itinerary.

        Raises:
            UnknownStopError: If either stop is not in the network.
            UnreachableError: If the stops are not connected.
            NoRouteServesStopError: If a stop on the path has no route.
        """
        graph = self.graph()
        self._logger.debug(
            "Planning journey",
            extra={"source": source, "destination": destination},
        )

        path = shortest_path(graph.adjacency, graph.stop_routes, source, destination)
        lines = coalesce_to_lines(path, graph.stop_routes)
        rides = split_into_rides(path, graph.stop_routes)

        journey = Journey(path=tuple(path), lines=tuple(lines), rides=tuple(rides))
        self._logger.info(
            "Journey planned",
            extra={
                "source": source,
                "destination": destination,
                "stops": journey.num_stops,
                "lines": list(journey.lines),
            },
        )
        return journey

    def plan_safe(
        self, source: str, destination: str
    ) -> Tuple[Optional[Journey], Optional[str]]:
        """Plan a journey, returning an error message instead of raising.

        Returns:
            Tuple of (Journey or None, error message or None).
        """
        try:
            return self.plan(source, destination), None
        except UnknownStopError as e:
            return None, f"Unknown stop: {e.stop_name}"
        except UnreachableError as e:
            return None, f"No path found between {e.source} and {e.destination}"
        except NoRouteServesStopError as e:
            return None, f"Data error: no route serves {e.stop_name}"
        except TransitRouterError as e:
            return None, f"Error: {e}"
