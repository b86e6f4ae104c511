"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

import requests

from meteomatics_query import __version__
from meteomatics_query.config import ConfigurationError, get_settings
from meteomatics_query.datasources.meteomatics import WeatherQueryClient, build_request
from meteomatics_query.schemas import Coordinates, DateRange, Metric, QueryConfig
from meteomatics_query.services.http import create_session

logger = logging.getLogger(__name__)


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude (default: from settings)")
    parser.add_argument(
        "--lon", type=float, default=None, help="Longitude (default: from settings)"
    )
    parser.add_argument(
        "--start",
        type=date.fromisoformat,
        default=None,
        help="First day, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--end",
        type=date.fromisoformat,
        default=None,
        help="Last day, YYYY-MM-DD (default: same as --start)",
    )
    parser.add_argument(
        "--elevation",
        type=float,
        default=2,
        help="Elevation in meters for humidity/temperature/wind/pressure (default: 2)",
    )
    parser.add_argument(
        "--frequency",
        type=str,
        default=None,
        help="ISO-8601 sampling interval, e.g. PT1H (default: from settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="meteomatics-query",
        description="Query weather metrics from the Meteomatics API",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    metrics = [m.value for m in Metric]

    url_parser = subparsers.add_parser("url", help="Print the request URL for a metric")
    url_parser.add_argument("metric", choices=metrics, help="Metric to request")
    _add_query_arguments(url_parser)

    fetch_parser = subparsers.add_parser("fetch", help="Fetch one metric, or all of them")
    fetch_parser.add_argument("metric", choices=[*metrics, "all"], help="Metric to request")
    _add_query_arguments(fetch_parser)

    return parser


def _query_inputs(args: argparse.Namespace) -> tuple[Coordinates, DateRange, str]:
    settings = get_settings()
    coordinates = Coordinates(
        latitude=args.lat if args.lat is not None else settings.lat,
        longitude=args.lon if args.lon is not None else settings.lon,
    )
    start = args.start or date.today()
    date_range = DateRange(start=start, end=args.end or start)
    frequency = args.frequency or settings.meteo_frequency
    return coordinates, date_range, frequency


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Endpoint: {settings.meteo_base_url}")
    print(f"Credentials: {'configured' if settings.has_credentials else 'missing'}")
    return 0


def cmd_url(args: argparse.Namespace) -> int:
    """Handle the 'url' command: build the URL, no network access."""
    try:
        coordinates, date_range, frequency = _query_inputs(args)
        config = QueryConfig(
            coordinates=coordinates,
            date_range=date_range,
            frequency=frequency,
            base_url=get_settings().meteo_base_url,
        )
        descriptor = build_request(config, args.metric, args.elevation)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(descriptor.url)
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command: request one or all metrics and print the bodies."""
    try:
        settings = get_settings()
        coordinates, date_range, frequency = _query_inputs(args)
        client = WeatherQueryClient(
            coordinates,
            date_range,
            settings.credentials(),
            frequency=frequency,
            base_url=settings.meteo_base_url,
            session=create_session(timeout=settings.meteo_timeout),
        )
        logger.debug("Querying %s with %r", args.metric, client)
        if args.metric == "all":
            metrics = list(Metric)
            responses = client.fetch_all(args.elevation)
        else:
            metrics = [Metric(args.metric)]
            responses = [client.fetch(args.metric, args.elevation)]
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    exit_code = 0
    for metric, resp in zip(metrics, responses, strict=True):
        print(f"== {metric} [{resp.status_code}]")
        print(resp.text)
        if not resp.ok:
            exit_code = 1
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "url": cmd_url,
        "fetch": cmd_fetch,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
