"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from mbta_router.config import reset_config
from mbta_router.domain.models import Route

ROUTES_CSV = Path(__file__).resolve().parents[1] / "data" / "routes.csv"


class StaticRoutes:
    """In-memory TransitDataPort returning a fixed route list."""

    def __init__(self, routes):
        self.routes = list(routes)
        self.calls = 0

    def list_routes(self):
        self.calls += 1
        return list(self.routes)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from the caller's MBTA_* environment."""
    for name in list(os.environ):
        if name.startswith("MBTA_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def routes_csv() -> Path:
    """Path to the bundled network snapshot."""
    return ROUTES_CSV


@pytest.fixture
def small_network() -> StaticRoutes:
    return StaticRoutes(
        [
            Route("Red", "Red Line", ("A", "B", "C")),
            Route("Blue", "Blue Line", ("B", "D", "E")),
            Route("Green", "Green Line", ("X", "Y")),
        ]
    )
