"""Tests for the CSV route repository."""

import pytest

from mbta_router.adapters.graph import CSVRouteRepository
from mbta_router.domain.errors import TransitDataError

HEADER = "route_id,route_long_name,stop_sequence,stop_name\n"


def _write(tmp_path, body):
    path = tmp_path / "routes.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_routes_grouped_and_ordered(tmp_path):
    path = _write(
        tmp_path,
        "Red,Red Line,2,Davis\n"
        "Blue,Blue Line,1,Bowdoin\n"
        "Red,Red Line,1,Alewife\n"
        "Red,Red Line,10,Porter\n",
    )

    routes = CSVRouteRepository(path).list_routes()

    assert [r.route_id for r in routes] == ["Red", "Blue"]
    assert routes[0].stops == ("Alewife", "Davis", "Porter")
    assert routes[1].long_name == "Blue Line"


def test_missing_long_name_falls_back_to_id(tmp_path):
    path = _write(tmp_path, "Mattapan,,1,Ashmont\n")

    assert CSVRouteRepository(path).list_routes()[0].long_name == "Mattapan"


def test_routes_are_cached_until_cleared(tmp_path):
    path = _write(tmp_path, "Red,Red Line,1,Alewife\n")
    repository = CSVRouteRepository(path)
    first = repository.list_routes()

    path.write_text(HEADER + "Blue,Blue Line,1,Bowdoin\n", encoding="utf-8")
    assert repository.list_routes() is first

    repository.clear_cache()
    assert repository.list_routes()[0].route_id == "Blue"


def test_missing_file(tmp_path):
    with pytest.raises(TransitDataError) as excinfo:
        CSVRouteRepository(tmp_path / "nope.csv").list_routes()

    assert excinfo.value.url.endswith("nope.csv")


def test_missing_columns(tmp_path):
    path = tmp_path / "routes.csv"
    path.write_text("route_id,stop_name\nRed,Alewife\n", encoding="utf-8")

    with pytest.raises(TransitDataError, match="missing columns"):
        CSVRouteRepository(path).list_routes()


@pytest.mark.parametrize(
    "row",
    ["Red,Red Line,first,Alewife\n", "Red,Red Line,1,\n", ",Red Line,1,Alewife\n"],
)
def test_invalid_rows(tmp_path, row):
    with pytest.raises(TransitDataError, match="line 2"):
        CSVRouteRepository(_write(tmp_path, row)).list_routes()


def test_bundled_snapshot_loads(routes_csv):
    routes = CSVRouteRepository(routes_csv).list_routes()

    assert {r.route_id for r in routes} >= {"Red", "Orange", "Blue"}
