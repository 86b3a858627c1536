"""CSV route repository adapter.

Reads a snapshot of the network from a single CSV file with one row
per (route, stop):

    route_id,route_long_name,stop_sequence,stop_name
    Red,Red Line,1,Alewife
    Red,Red Line,2,Davis

Routes keep the order in which they first appear in the file; stops
are ordered by ``stop_sequence`` within their route.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ...domain.errors import TransitDataError
from ...domain.models import Route

REQUIRED_COLUMNS = ("route_id", "route_long_name", "stop_sequence", "stop_name")


@dataclass
class CSVRouteRepository:
    """Transit data source that loads routes from a CSV file.

    This adapter implements TransitDataPort.

    Attributes:
        path: Path to the routes CSV file
    """

    path: Path
    _routes: Optional[List[Route]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def list_routes(self) -> List[Route]:
        """Load routes from the CSV file.

        Raises:
            TransitDataError: If the file cannot be read or a row is invalid.
        """
        if self._routes is not None:
            return self._routes

        self._logger.debug("Loading routes", extra={"path": str(self.path)})
        try:
            routes = self._load_routes_from_csv()
        except OSError as e:
            raise TransitDataError(
                f"Failed to read routes file {self.path}",
                url=str(self.path),
                cause=e,
            )

        self._routes = routes
        self._logger.info("Routes loaded", extra={"routes": len(routes)})
        return routes

    def _load_routes_from_csv(self) -> List[Route]:
        names: Dict[str, str] = {}
        stops: Dict[str, List[Tuple[int, str]]] = {}

        with self.path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise TransitDataError(
                    f"Routes file is missing columns: {', '.join(missing)}",
                    url=str(self.path),
                )

            for line_no, row in enumerate(reader, start=2):
                route_id = (row["route_id"] or "").strip()
                stop_name = (row["stop_name"] or "").strip()
                if not route_id or not stop_name:
                    raise TransitDataError(
                        f"Empty route_id or stop_name on line {line_no}",
                        url=str(self.path),
                    )
                try:
                    sequence = int(row["stop_sequence"])
                except (TypeError, ValueError) as e:
                    raise TransitDataError(
                        f"Invalid stop_sequence on line {line_no}",
                        url=str(self.path),
                        cause=e,
                    )

                names.setdefault(route_id, (row["route_long_name"] or "").strip())
                stops.setdefault(route_id, []).append((sequence, stop_name))

        return [
            Route(
                route_id=route_id,
                long_name=long_name or route_id,
                stops=tuple(name for _, name in sorted(stops[route_id], key=lambda s: s[0])),
            )
            for route_id, long_name in names.items()
        ]

    def clear_cache(self) -> None:
        """Forget the parsed routes so the next call re-reads the file."""
        self._routes = None
