"""MBTA v3 API client.

Fetches the subway and light-rail routes, then the ordered stop
listing of each route, and hands them over as domain ``Route``
objects. Transport, authentication and JSON decoding problems are
raised as ``TransitDataError``.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import requests

from ...config import MBTAConfig, get_config
from ...domain.errors import TransitDataError
from ...domain.models import Route
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache


@dataclass
class MBTAClient:
    """Transit data source backed by the MBTA v3 API.

    This adapter implements TransitDataPort.

    Attributes:
        config: API configuration (base URL, key, route types)
        cache: Cache for per-route stop listings
        session: HTTP session, injectable for tests
    """

    config: MBTAConfig = field(default_factory=lambda: get_config().api)
    cache: CachePort[List[str]] = field(
        default_factory=lambda: InMemoryCache(name="mbta_stops")
    )
    session: requests.Session = field(default_factory=requests.Session)

    _api_key: Optional[str] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._api_key = self.config.resolve_api_key()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["x-api-key"] = self._api_key
        return headers

    def _get(self, path: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """GET a JSON:API collection and return its ``data`` items."""
        url = f"{self.config.base_url.rstrip('/')}/{path}"
        self._logger.debug("MBTA request", extra={"url": url, "params": params})

        try:
            response = self.session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransitDataError(
                f"MBTA request failed with status {status}",
                url=url,
                status_code=status,
                cause=e,
            )
        except requests.RequestException as e:
            raise TransitDataError("MBTA request failed", url=url, cause=e)

        try:
            payload = response.json()
        except ValueError as e:
            self._logger.error(
                "Failed to parse MBTA response",
                extra={"url": url, "body": response.text[:500]},
            )
            raise TransitDataError(
                "Failed to parse MBTA JSON response", url=url, cause=e
            )

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise TransitDataError("MBTA response has no data list", url=url)
        return data

    def list_route_summaries(self) -> List[Tuple[str, str]]:
        """Return ``(route_id, long_name)`` for every route of interest.

        Raises:
            TransitDataError: If the request fails or the payload is malformed.
        """
        items = self._get(
            "routes",
            {"filter[type]": self.config.route_types, "include": "line"},
        )
        try:
            return [(item["id"], item["attributes"]["long_name"]) for item in items]
        except (KeyError, TypeError) as e:
            raise TransitDataError("Malformed route listing", url="routes", cause=e)

    def list_stop_names(self, route_id: str) -> List[str]:
        """Return the stop names of a route in the provider's order."""

        def fetch() -> List[str]:
            items = self._get("stops", {"filter[route]": route_id})
            try:
                return [item["attributes"]["name"] for item in items]
            except (KeyError, TypeError) as e:
                raise TransitDataError(
                    f"Malformed stop listing for route {route_id}",
                    url="stops",
                    cause=e,
                )

        return self.cache.get_or_compute(f"stops:{route_id}", fetch)

    def list_routes(self) -> List[Route]:
        """Fetch all routes with their stops, sorted by route ID.

        Stop listings are fetched concurrently; sorting afterwards keeps
        the graph build order independent of completion order.
        """
        summaries = self.list_route_summaries()
        workers = min(self.config.max_workers, max(len(summaries), 1))

        with ThreadPoolExecutor(max_workers=workers) as pool:
            stop_lists = list(
                pool.map(self.list_stop_names, [route_id for route_id, _ in summaries])
            )

        routes = [
            Route(route_id=route_id, long_name=long_name, stops=tuple(stops))
            for (route_id, long_name), stops in zip(summaries, stop_lists)
        ]
        routes.sort(key=lambda route: route.route_id)

        self._logger.info("Routes loaded from MBTA", extra={"routes": len(routes)})
        return routes
