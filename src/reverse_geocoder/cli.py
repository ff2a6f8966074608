"""Command line entry point: print the address nearest to a coordinate."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .components import Location, UserLocation
from .engine import ReverseGeocoder
from .errors import DatasetLoadError
from .loader import load_geolonia
from .logging_config import get_logger, setup_logging
from .settings import GeocoderSettings


def _format_degrees(value: float) -> str:
    return str(np.float32(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reverse-geocoder",
        description="Find the nearest known address to a latitude/longitude.",
    )
    parser.add_argument("latitude", type=float, help="latitude in degrees")
    parser.add_argument("longitude", type=float, help="longitude in degrees")
    parser.add_argument(
        "accuracy",
        type=float,
        nargs="?",
        default=1.0,
        help="position accuracy in meters (default: 1)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Geolonia address CSV (default: REVERSE_GEOCODER_DATA_PATH or ./latest.csv)",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = GeocoderSettings()
    setup_logging(level="DEBUG" if args.debug else settings.log_level)
    logger = get_logger(__name__)

    geocoder = ReverseGeocoder(config=settings.to_config(), workers=settings.workers)
    data_path = args.data or settings.data_path
    try:
        load_geolonia(geocoder, data_path, skip_invalid=settings.skip_invalid_lines)
    except DatasetLoadError as exc:
        logger.error(f"Failed to load addresses: {exc}")
        return 1

    query = UserLocation(
        location=Location(latitude=args.latitude, longitude=args.longitude),
        accuracy=args.accuracy,
    )
    address = geocoder.reverse(query)
    if address is None:
        print("No address found nearby")
        return 1

    print("Nearest address")
    print(address.full_name)
    print(f"{_format_degrees(address.location.latitude)} / {_format_degrees(address.location.longitude)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
