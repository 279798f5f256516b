"""
List Metrorail stations from the command line.

Usage:
    wmata-stations --wmata_key KEY [--metro_line RD]

The key falls back to the WMATA_API_KEY environment variable.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import httpx

from wmata.core.config import get_settings
from wmata.core.log_config import configure_logging
from wmata.services.rail_info import RailStationInfoService
from wmata.services.wmata_client import WMATAClient
from wmata.services.wmata_errors import WMATAError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="wmata-stations",
        description="Print the code and name of every station on a Metrorail line",
    )
    parser.add_argument(
        "--wmata_key",
        default=settings.wmata_api_key,
        help="API key used to access WMATA API (default: $WMATA_API_KEY)",
    )
    parser.add_argument(
        "--metro_line",
        default="",
        help="Line code or name to filter by, e.g. RD or red (default: all lines)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the wmata-stations console script."""
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.wmata_key:
        logger.error("flag: wmata_key is required")
        return 1

    with WMATAClient(
        args.wmata_key,
        base_url=settings.wmata_base_url,
        timeout=settings.wmata_timeout_seconds,
    ) as client:
        service = RailStationInfoService(client, settings.wmata_response_format)
        try:
            response = service.get_station_list(args.metro_line or None)
        except (httpx.HTTPError, WMATAError, ValueError) as exc:
            logger.error("error retrieving station information: %s", exc)
            return 1

    for station in response.stations:
        print(f"{station.station_code}\t{station.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
