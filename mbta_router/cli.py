"""Command-line interface for mbta-router."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import ObservabilityConfig, get_config
from .container import create_service
from .domain.errors import TransitRouterError
from .domain.models import Journey
from .services import TransitNetworkService


def setup_logging(config: ObservabilityConfig, verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else config.level.upper()
    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _service(args: argparse.Namespace) -> TransitNetworkService:
    csv_path = Path(args.csv) if args.csv else None
    return create_service(get_config(), csv_path)


def cmd_routes(args: argparse.Namespace) -> int:
    """Print the long name of every route."""
    for _, long_name in _service(args).route_names():
        print(long_name)
    return 0


def cmd_stops(args: argparse.Namespace) -> int:
    """Print every known stop name."""
    for name in _service(args).stop_names():
        print(name)
    return 0


def cmd_extremes(args: argparse.Namespace) -> int:
    """Print the routes with the most and fewest stops."""
    extremes = _service(args).stop_count_extremes()
    if extremes is None:
        print("No routes loaded.")
        return 0

    print(f"Most stops ({extremes.max_stops}):")
    for count in extremes.most:
        print(f"  {count.long_name} [{count.route_id}]")
    print(f"Fewest stops ({extremes.min_stops}):")
    for count in extremes.fewest:
        print(f"  {count.long_name} [{count.route_id}]")
    return 0


def cmd_connections(args: argparse.Namespace) -> int:
    """Print stops connecting two or more routes."""
    for stop, route_ids in _service(args).connecting_stops().items():
        print(f"{stop}: {', '.join(route_ids)}")
    return 0


def cmd_serving(args: argparse.Namespace) -> int:
    """Print the routes serving a stop."""
    for route_id in _service(args).routes_serving(args.stop):
        print(route_id)
    return 0


def format_journey(journey: Journey) -> str:
    """Render a journey as printable lines."""
    lines = [f"Path ({journey.num_stops} stops): {' -> '.join(journey.path)}"]
    lines.append(f"Lines: {', '.join(journey.lines)}")
    for ride in journey.rides:
        lines.append(f"  {ride.route_id}: {ride.board} -> {ride.alight}")
    return "\n".join(lines)


def cmd_plan(args: argparse.Namespace) -> int:
    """Plan a journey, prompting for missing endpoints."""
    source = args.source or input("From: ").strip()
    destination = args.destination or input("To: ").strip()

    journey = _service(args).plan(source, destination)
    print(format_journey(journey))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mbta-router",
        description="Answer routing questions over the MBTA rapid transit network",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--csv",
        default=None,
        help="Load routes from this CSV file instead of the MBTA API",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("routes", help="List route names").set_defaults(func=cmd_routes)
    subparsers.add_parser("stops", help="List stop names").set_defaults(func=cmd_stops)
    subparsers.add_parser(
        "extremes", help="Routes with the most and fewest stops"
    ).set_defaults(func=cmd_extremes)
    subparsers.add_parser(
        "connections", help="Stops connecting two or more routes"
    ).set_defaults(func=cmd_connections)

    serving_parser = subparsers.add_parser("serving", help="Routes serving a stop")
    serving_parser.add_argument("stop", help="Stop name")
    serving_parser.set_defaults(func=cmd_serving)

    plan_parser = subparsers.add_parser("plan", help="Plan a journey between two stops")
    plan_parser.add_argument("--from", dest="source", help="Departure stop name")
    plan_parser.add_argument("--to", dest="destination", help="Arrival stop name")
    plan_parser.set_defaults(func=cmd_plan)

    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, execute the command and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(get_config().observability, args.verbose)
        return args.func(args)
    except TransitRouterError as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        return 1
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: no input provided", file=sys.stderr)
        return 1


def main() -> None:
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
