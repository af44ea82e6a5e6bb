# mapfan_route/addressing/coords.py
# -*- coding: utf-8 -*-

"""
Coordinate parsing for CLI input.

The route service takes longitude first, so user input is "lon,lat".
"""

from __future__ import annotations

from typing import List

from mapfan_route.core.models import Position
from mapfan_route.infra.logging import get_logger
from mapfan_route.road.route_common import InvalidPosition

_log = get_logger(__name__)


# ------------------------------------------------------------------------------
# Parse "lon,lat"
# ------------------------------------------------------------------------------

def parse_lonlat_str(text: str) -> Position:
    """
    Accepts 'lon,lat' (exactly two comma-separated numbers). No range check.

    Raises
    ------
    InvalidPosition
        If the text is not exactly two numbers.
    """
    if not isinstance(text, str):
        raise InvalidPosition(f"invalid position {text!r}: it must be 'lon,lat' format")

    parts = text.split(",")
    values: List[float] = []
    for part in parts:
        try:
            values.append(float(part))
        except ValueError:
            _log.debug("position %r: %r is not a number", text, part)
            raise InvalidPosition(
                f"invalid position {text!r}: {part.strip()!r} is not a number"
            ) from None

    if len(values) != 2:
        raise InvalidPosition(
            f"invalid position {text!r}: it must be 'lon,lat' format, got {len(values)} value(s)"
        )

    return Position(longitude=values[0], latitude=values[1])
