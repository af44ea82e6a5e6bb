#!/usr/bin/env python3
# mapfan_route/road/router.py
# -*- coding: utf-8 -*-

"""
Route CLI: one calculation (or one stored-result lookup) per run.

Usage
-----
    export RAPID_API_KEY=...
    python -m mapfan_route.road.router route -f 139.767,35.681 -t 139.69,35.64
    python -m mapfan_route.road.router route -f 139.767,35.681 -t 139.69,35.64 \
        -d 20221204_100000 -o out/route.json
    python -m mapfan_route.road.router route --result-id <routeResultId>

Output
------
The route result as one compact JSON line on stdout (``--pretty`` indents it),
or written to ``-o/--output``. Logs go to stderr.

Exit codes
----------
    0  ok
    2  invalid input (coordinates, date, missing arguments)
    3  RAPID_API_KEY not set
    4  network failure or non-200 answer
    5  response is not a valid route result
    6  result could not be written to -o/--output
"""

from __future__ import annotations

# ────────────────────────────────────────────────────────────────────────────────
# Standard libs
# ────────────────────────────────────────────────────────────────────────────────
import argparse
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# ────────────────────────────────────────────────────────────────────────────────
# Project imports
# ────────────────────────────────────────────────────────────────────────────────
from mapfan_route.addressing.coords import parse_lonlat_str
from mapfan_route.infra.logging import init_logging, get_logger, get_current_log_path
from mapfan_route.road.route_client import RouteClient
from mapfan_route.road.route_common import (
      InvalidInput
    , MissingApiKey
    , OutputError
    , RouteConfig
    , RouteError
    , RouteSchemaError
    , RouteTransportError
)
from mapfan_route.road.route_params import CarType, RouteParams, VehicleType
from mapfan_route.road.route_schema import dump_result

_log = get_logger(__name__)

_DATE_RE = re.compile(r"^\d{8}_\d{6}$")
_DATE_FMT = "%Y%m%d_%H%M%S"

EXIT_OK = 0
EXIT_INPUT = 2
EXIT_CONFIG = 3
EXIT_TRANSPORT = 4
EXIT_SCHEMA = 5
EXIT_OUTPUT = 6


# ────────────────────────────────────────────────────────────────────────────────
# Small helpers
# ────────────────────────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    """
    Build and return the CLI argument parser (single `route` subcommand).
    """
    parser = argparse.ArgumentParser(
          prog="mapfan-route"
        , description="Calculate a route with the MapFan route API and print the JSON result."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="Execute Route")

    # Spatial inputs
    route.add_argument(
          "-f", "--from"
        , dest="origin"
        , default=None
        , help="Origin. Must be 'longitude,latitude' format."
    )
    route.add_argument(
          "-t", "--to"
        , dest="destination"
        , default=None
        , help="Destination. Must be 'longitude,latitude' format."
    )
    route.add_argument(
          "-v", "--via"
        , default=None
        , help="Via point(s): 'lon,lat' or 'lon,lat,type,priority|...'."
    )
    route.add_argument(
          "-d", "--date"
        , default=None
        , help="Departure datetime, 'yyyyMMdd_HHmmss'."
    )

    # Lookup mode
    route.add_argument(
          "--result-id"
        , default=None
        , help="Fetch a previous result by its routeResultId (ignores every other route option)."
    )

    # Vehicle knobs
    route.add_argument(
          "--vehicle-type"
        , type=int
        , default=None
        , choices=[int(v) for v in VehicleType]
        , help="Vehicle type code for road regulations (2 = large freight)."
    )
    route.add_argument(
          "--car-type"
        , type=int
        , default=None
        , choices=[int(c) for c in CarType]
        , help="Car type code for toll pricing."
    )

    # Output + logging
    route.add_argument(
          "-o", "--output"
        , type=Path
        , default=None
        , help="Write the JSON result to this file instead of stdout."
    )
    route.add_argument(
          "--pretty"
        , action="store_true"
        , help="Pretty-print JSON."
    )
    route.add_argument(
          "--log-level"
        , default="WARNING"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    route.add_argument(
          "--log-file"
        , type=Path
        , default=None
        , help="Also write logs to this file."
    )

    return parser


def _check_date(
    value: str
) -> str:
    """
    Validate a 'yyyyMMdd_HHmmss' departure string and return it unchanged.
    """
    if not _DATE_RE.match(value):
        raise InvalidInput(f"invalid date {value!r}: it must be 'yyyyMMdd_HHmmss' format")
    try:
        datetime.strptime(value, _DATE_FMT)
    except ValueError as exc:
        raise InvalidInput(f"invalid date {value!r}: {exc}") from None
    return value


def _params_from_args(
    args: argparse.Namespace
) -> RouteParams:
    """
    Translate parsed CLI arguments into RouteParams. Raises InvalidInput.
    """
    if args.result_id is not None:
        return RouteParams.with_result_id(args.result_id)

    origin = parse_lonlat_str(args.origin)
    destination = parse_lonlat_str(args.destination)
    _log.debug("Positions parsed: origin=%s destination=%s", origin.as_pair(), destination.as_pair())

    params = RouteParams.new(origin, destination)
    if args.date is not None:
        params.departure(_check_date(args.date))
    if args.via is not None:
        params.via_points(args.via)
    if args.vehicle_type is not None:
        params.vehicle_type(VehicleType(args.vehicle_type))
    if args.car_type is not None:
        params.car_type(CarType(args.car_type))
    return params


def _write_output(
    text: str,
    output: Optional[Path],
) -> None:
    if output is None:
        print(text)
        return
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"cannot write {output}: {exc.strerror or exc}") from exc
    _log.info("Route result written to %s (%s chars)", output, len(text))


def _exit_code_for(
    exc: RouteError
) -> int:
    if isinstance(exc, InvalidInput):
        return EXIT_INPUT
    if isinstance(exc, MissingApiKey):
        return EXIT_CONFIG
    if isinstance(exc, RouteTransportError):
        return EXIT_TRANSPORT
    if isinstance(exc, RouteSchemaError):
        return EXIT_SCHEMA
    if isinstance(exc, OutputError):
        return EXIT_OUTPUT
    return 1


def handle_route(
    args: argparse.Namespace
) -> int:
    """
    Config → params → one GET → parse → write. Errors propagate to main().
    """
    cfg = RouteConfig()
    params = _params_from_args(args)

    with RouteClient(cfg=cfg) as client:
        result = client.calc_route(params)

    text = dump_result(result, indent=2 if args.pretty else None)
    _write_output(text, args.output)
    return EXIT_OK


# ────────────────────────────────────────────────────────────────────────────────
# Main
# ────────────────────────────────────────────────────────────────────────────────

def main(
    argv: Optional[list[str]] = None
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.result_id is None and (args.origin is None or args.destination is None):
        parser.error("route: -f/--from and -t/--to are required unless --result-id is given")

    init_logging(level=args.log_level, force=True, log_file=args.log_file)
    if args.log_file is not None:
        _log.info("Log file → %s", get_current_log_path())

    try:
        return handle_route(args)
    except RouteError as exc:
        _log.error("%s: %s", type(exc).__name__, exc)
        print(f"error: {exc}", file=sys.stderr)
        return _exit_code_for(exc)


if __name__ == "__main__":
    raise SystemExit(main())
