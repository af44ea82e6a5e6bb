# mapfan_route/road/route_params.py
# -*- coding: utf-8 -*-
"""
Query parameters for the ``/calcroute`` endpoint.

Two ways to build a request:

    RouteParams.new(start, destination)      fresh calculation; every
                                             modifier starts unset
    RouteParams.with_result_id(result_id)    fetch a previous result; only
                                             ``routeresultid`` is ever sent

Modifiers are set with fluent setters (each returns the same object):

    params = RouteParams.new(a, b).vehicle_type(VehicleType.BIG_CARGO).departure("20221204_100000")
    params.to_params()
    # [("start", ...), ("destination", ...), ("date", ...), ("vehicletype", "2")]

Rendering rules
---------------
• Unset modifiers are omitted entirely (never an empty value).
• Integer enums go out as their numeric code; OutputFormat as "json"/"xml".
• Numbers use their shortest text form (40.0 → "40").
• Values are *not* percent-encoded here; requests does that.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum, IntEnum
from typing import Any, Optional

from mapfan_route.core.models import Position, format_number
from mapfan_route.core.types import QueryPairs
from mapfan_route.infra.logging import get_logger

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Enums (numeric codes as defined by the vendor)
# ────────────────────────────────────────────────────────────────────────────────

class Priority(IntEnum):
    NORMAL = 0
    DISTANCE_FIRST = 1
    STRAIGHT_FIRST = 2
    SIMPLE_WALKER = 3
    ROAD_WIDTH_FIRST = 4
    NORMAL_WALKER = 100
    WALKER_DISTANCE_FIRST = 101
    WALKER_ROOF_FIRST = 102
    WALKER_LESS_STEPS = 103


class Tollway(IntEnum):
    NORMAL = 0
    PRIORITY = 1
    AVOID = 2
    NEVER = 3


class Ferry(IntEnum):
    NORMAL = 0
    PRIORITY = 1
    AVOID = 2
    NEVER = 3


class CarType(IntEnum):
    """Vehicle class used for toll pricing."""
    SMALL = 0       # kei car
    NORMAL = 1
    MIDDLE = 2
    BIG = 3
    SUPER_BIG = 4


class VehicleType(IntEnum):
    """Vehicle class used for road regulations."""
    NONE = 0
    BIG = 1         # large passenger vehicle
    BIG_CARGO = 2   # large freight vehicle
    BIG_SPECIAL = 11


class OnOff(IntEnum):
    OFF = 0
    ON = 1


class OutputFormat(str, Enum):
    JSON = "json"
    XML = "xml"


# ────────────────────────────────────────────────────────────────────────────────
# Parameter record
# ────────────────────────────────────────────────────────────────────────────────

# Keys that are not modifiers: emitted by the mode logic in to_params().
_MODE_KEYS = frozenset({"start", "destination", "routeresultid"})


def _render(value: Any) -> str:
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, Enum):
        return str(value.value)
    # flags go out as 1/0
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


@dataclass
class RouteParams:
    """
    Full parameter set for one ``/calcroute`` call.

    Field order is the order in which keys are emitted. Field names are the
    vendor's query keys.

    Build one with ``RouteParams.new(start, destination)`` or
    ``RouteParams.with_result_id(result_id)``. A record with neither both
    positions nor a result id is rejected with ValueError.
    """

    start: str = ""
    destination: str = ""

    # starting angle 0 ~ 359
    startangle: Optional[int] = None
    # 'lon,lat,type,priority|lon,lat,type,priority|...'
    via: Optional[str] = None
    # departure "yyyyMMdd_HHmmss"
    date: Optional[str] = None
    priority: Optional[Priority] = None
    tollway: Optional[Tollway] = None
    ferry: Optional[Ferry] = None
    # server default: ON
    smartic: Optional[OnOff] = None
    # server default: ON
    etc: Optional[OnOff] = None
    # 1 = normal + ETC discount
    tolltarget: Optional[int] = None
    cartype: Optional[CarType] = None
    # km/h
    normalspeed: Optional[float] = None
    highwayspeed: Optional[float] = None
    tollwayspeed: Optional[float] = None
    ferryspeed: Optional[float] = None
    vehicletype: Optional[VehicleType] = None
    # cm
    height: Optional[int] = None
    # kg
    loadage: Optional[int] = None
    # kg
    weight: Optional[int] = None
    # cm
    width: Optional[int] = None
    # 1 = dangerous cargo
    danger: Optional[int] = None
    # 1 = apply daytime restrictions
    daytime: Optional[int] = None
    # 1 = apply general road restrictions
    generalroad: Optional[int] = None
    # server default: ON
    tollroad: Optional[OnOff] = None
    # one-way restrictions, server default: OFF
    regulations: Optional[OnOff] = None
    travel: Optional[OnOff] = None
    # ON also returns a routeResultId for later lookup (server default: ON)
    resulttype: Optional[OnOff] = None
    routeresultid: Optional[str] = None
    fmt: Optional[OutputFormat] = None

    def __post_init__(self) -> None:
        if self.routeresultid is None and not (self.start and self.destination):
            raise ValueError(
                "RouteParams needs start and destination, or a result id "
                "(use RouteParams.new or RouteParams.with_result_id)"
            )

    # ────────────────────────────────────────────────────────────────────────
    # Constructors
    # ────────────────────────────────────────────────────────────────────────
    @classmethod
    def new(cls, start: Position, destination: Position) -> "RouteParams":
        """Fresh calculation between two positions."""
        return cls(start=start.as_param(), destination=destination.as_param())

    @classmethod
    def with_result_id(cls, result_id: str) -> "RouteParams":
        """Lookup of a previously calculated route by its result id."""
        return cls(routeresultid=result_id)

    @property
    def is_lookup(self) -> bool:
        return self.routeresultid is not None

    # ────────────────────────────────────────────────────────────────────────
    # Fluent setters
    # ────────────────────────────────────────────────────────────────────────
    def start_angle(self, degrees: int) -> "RouteParams":
        self.startangle = degrees
        return self

    def via_points(self, via: str) -> "RouteParams":
        """
        Set waypoints, ``"lon,lat,type,priority"`` entries joined with ``|``.
        A plain ``"lon,lat"`` is accepted by the service too.
        """
        self.via = via
        return self

    def departure(self, date: str) -> "RouteParams":
        """
        Departure date-time, expected as ``yyyyMMdd_HHmmss``.

        The format is not checked here; the CLI validates user input.
        """
        self.date = date
        return self

    def route_priority(self, priority: Priority) -> "RouteParams":
        self.priority = priority
        return self

    def tollway_preference(self, tollway: Tollway) -> "RouteParams":
        self.tollway = tollway
        return self

    def ferry_preference(self, ferry: Ferry) -> "RouteParams":
        self.ferry = ferry
        return self

    def smart_ic(self, value: OnOff) -> "RouteParams":
        self.smartic = value
        return self

    def use_etc(self, value: OnOff) -> "RouteParams":
        self.etc = value
        return self

    def toll_target(self, value: int) -> "RouteParams":
        self.tolltarget = value
        return self

    def car_type(self, cartype: CarType) -> "RouteParams":
        self.cartype = cartype
        return self

    def speeds(
        self,
        *,
        normal: Optional[float] = None,
        highway: Optional[float] = None,
        tollway: Optional[float] = None,
        ferry: Optional[float] = None,
    ) -> "RouteParams":
        """Set any of the four speed overrides (km/h); None leaves a speed untouched."""
        if normal is not None:
            self.normalspeed = normal
        if highway is not None:
            self.highwayspeed = highway
        if tollway is not None:
            self.tollwayspeed = tollway
        if ferry is not None:
            self.ferryspeed = ferry
        return self

    def vehicle_type(self, vehicletype: VehicleType) -> "RouteParams":
        self.vehicletype = vehicletype
        return self

    def dimensions(
        self,
        *,
        height: Optional[int] = None,
        loadage: Optional[int] = None,
        weight: Optional[int] = None,
        width: Optional[int] = None,
    ) -> "RouteParams":
        """Vehicle size: height/width in cm, loadage/weight in kg."""
        if height is not None:
            self.height = height
        if loadage is not None:
            self.loadage = loadage
        if weight is not None:
            self.weight = weight
        if width is not None:
            self.width = width
        return self

    def dangerous_cargo(self, value: int = 1) -> "RouteParams":
        self.danger = value
        return self

    def daytime_restriction(self, value: int = 1) -> "RouteParams":
        self.daytime = value
        return self

    def general_road_restriction(self, value: int = 1) -> "RouteParams":
        self.generalroad = value
        return self

    def toll_road_restriction(self, value: OnOff) -> "RouteParams":
        self.tollroad = value
        return self

    def oneway_regulations(self, value: OnOff) -> "RouteParams":
        self.regulations = value
        return self

    def travel_route(self, value: OnOff) -> "RouteParams":
        self.travel = value
        return self

    def result_type(self, resulttype: OnOff) -> "RouteParams":
        self.resulttype = resulttype
        return self

    def output_format(self, fmt: OutputFormat) -> "RouteParams":
        self.fmt = fmt
        return self

    # ────────────────────────────────────────────────────────────────────────
    # Serialization
    # ────────────────────────────────────────────────────────────────────────
    def to_params(self) -> QueryPairs:
        """
        Ordered (key, value) pairs for the query string.

        With a result id set, that is the only pair. Otherwise start and
        destination come first, followed by every *set* modifier in field order.
        """
        if self.routeresultid is not None:
            return [("routeresultid", self.routeresultid)]

        pairs: QueryPairs = [
              ("start", self.start)
            , ("destination", self.destination)
        ]
        for f in fields(self):
            if f.name in _MODE_KEYS:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            pairs.append((f.name, _render(value)))
        return pairs


MODIFIER_KEYS = tuple(f.name for f in fields(RouteParams) if f.name not in _MODE_KEYS)


# ────────────────────────────────────────────────────────────────────────────────
# Entry points
# ────────────────────────────────────────────────────────────────────────────────

def build_params(
    origin: Position,
    destination: Position,
    **modifiers: Any,
) -> QueryPairs:
    """
    Build query pairs for a fresh calculation.

    Keyword arguments use the vendor's query keys (``vehicletype=...``,
    ``date=...``); None values are treated as unset.

    Raises
    ------
    TypeError
        On an unknown modifier name.
    """
    params = RouteParams.new(origin, destination)
    for key, value in modifiers.items():
        if key not in MODIFIER_KEYS:
            raise TypeError(f"unknown route modifier: {key!r}")
        setattr(params, key, value)
    pairs = params.to_params()
    _log.debug("build_params → %s", pairs)
    return pairs


def build_lookup_params(result_id: str) -> QueryPairs:
    """Build query pairs that fetch a stored result by id."""
    return RouteParams.with_result_id(result_id).to_params()
