"""Command line interface printing the 24-hour report."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

import httpx

from yr_report.config import DEFAULT_LAT, DEFAULT_LON, SERVICE_NAME, SERVICE_VERSION
from yr_report.logging_config import configure_cli_logging
from yr_report.weather.geocoding import GeocodingError
from yr_report.weather.service import WeatherService

logger = logging.getLogger(__name__)


COORDS_FORMAT_ERROR = "Invalid coordinates format. Use LAT,LON (e.g., 59.91,10.75)"


def parse_coords(value: str) -> Tuple[float, float]:
    """Parse 'LAT,LON' into a coordinate pair.

    Raises:
        ValueError: If the value is malformed or out of range
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise ValueError(COORDS_FORMAT_ERROR)
    try:
        lat, lon = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(COORDS_FORMAT_ERROR) from None
    if not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
        raise ValueError(f"Coordinates out of range: {value}")
    return lat, lon


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVICE_NAME,
        description="Gets a 24-hour weather forecast for a named location or coordinates."
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "-l", "--location",
        metavar="NAME",
        help='Get forecast for a named location (e.g., "Oslo" or "New York, USA")'
    )
    target.add_argument(
        "-c", "--coords",
        metavar="LAT,LON",
        help='Get forecast for specific coordinates (e.g., "59.91,10.75")'
    )
    parser.add_argument(
        "-t", "--timezone",
        choices=("utc", "local"),
        default="utc",
        help="Show times in UTC (default) or the location's local timezone"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="version", version=f"{SERVICE_NAME} version {SERVICE_VERSION}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line; --coords becomes a (lat, lon) tuple.

    Raises:
        ValueError: If --coords is invalid
    """
    args = build_parser().parse_args(argv)
    if args.coords is not None:
        args.coords = parse_coords(args.coords)
    return args


async def run(args: argparse.Namespace, service: Optional[WeatherService] = None) -> int:
    """Fetch and print the report; returns the process exit status."""
    lat, lon = args.coords if args.coords else (DEFAULT_LAT, DEFAULT_LON)

    try:
        async with (service or WeatherService()) as weather_service:
            report = await weather_service.get_report(
                lat=lat,
                lon=lon,
                city=args.location,
                timezone_option=args.timezone
            )
    except GeocodingError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (httpx.HTTPError, ValueError) as e:
        print(f"Failed to fetch weather: {e}", file=sys.stderr)
        return 1

    print(report.report)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the yr-report command."""
    try:
        args = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_cli_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
