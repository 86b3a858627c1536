"""Tests for the command-line interface, run against the bundled snapshot."""

import pytest

from mbta_router.cli import run


@pytest.fixture
def cli(routes_csv, capsys):
    def invoke(*argv):
        code = run(["--csv", str(routes_csv), *argv])
        out, err = capsys.readouterr()
        return code, out, err

    return invoke


def test_no_command_prints_help(capsys):
    assert run([]) == 1
    assert "usage" in capsys.readouterr().out


def test_routes(cli):
    code, out, _ = cli("routes")

    assert code == 0
    assert "Red Line" in out.splitlines()


def test_stops(cli):
    code, out, _ = cli("stops")

    assert code == 0
    assert "Alewife" in out.splitlines()
    assert out.splitlines() == sorted(out.splitlines())


def test_extremes(cli):
    code, out, _ = cli("extremes")

    assert code == 0
    assert "Most stops (22):" in out
    assert "  Green Line D [Green-D]" in out
    assert "Fewest stops (8):" in out
    assert "  Mattapan Trolley [Mattapan]" in out


def test_connections(cli):
    code, out, _ = cli("connections")

    assert code == 0
    assert "Downtown Crossing: Orange, Red" in out
    assert "Park Street: Green-B, Green-D, Red" in out


def test_serving(cli):
    code, out, _ = cli("serving", "State")

    assert code == 0
    assert out.splitlines() == ["Blue", "Orange"]


def test_plan_switches_line_where_the_route_ends(cli):
    code, out, _ = cli("plan", "--from", "Alewife", "--to", "Wonderland")

    assert code == 0
    assert "Downtown Crossing -> State -> Aquarium" in out
    assert "Lines: Red, Blue" in out
    assert "  Red: Alewife -> Downtown Crossing" in out
    assert "  Blue: Downtown Crossing -> Wonderland" in out


def test_plan_prompts_for_missing_stops(cli, monkeypatch):
    answers = iter(["Ashmont", "Mattapan"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    code, out, _ = cli("plan")

    assert code == 0
    assert "Lines: Mattapan" in out


def test_plan_unknown_stop(cli):
    code, _, err = cli("plan", "--from", "Alewife", "--to", "Atlantis")

    assert code == 1
    assert "Unknown stop: Atlantis" in err


def test_plan_with_closed_stdin(cli, monkeypatch):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    code, _, err = cli("plan", "--from", "Alewife")

    assert code == 1
    assert "no input provided" in err


def test_invalid_configuration_is_reported(routes_csv, monkeypatch, capsys):
    monkeypatch.setenv("MBTA_DATA_SOURCE", "carrier-pigeon")

    code = run(["--csv", str(routes_csv), "stops"])

    assert code == 1
    assert "invalid configuration" in capsys.readouterr().err
