# mapfan_route/road/route_schema.py
# -*- coding: utf-8 -*-
"""
Response models for ``/calcroute`` (JSON format).

Every field is optional: the service leaves fields out depending on
``resulttype``, the road class and how complex the route is. Models are
strict about the *type* of a present field (a string where a number belongs
is an error) but never about presence.

    result = parse_response(body)        # RouteSchemaError on bad input
    text = dump_result(result)           # same fields, vendor names

Serialization uses the vendor's field names (``routeId``, ``guidePoints``,
``shapeIndexFirst`` ...) and only the fields that came in, so an absent field
stays absent rather than turning into ``null``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .route_common import RouteSchemaError
from mapfan_route.infra.logging import get_logger

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Enums
# ────────────────────────────────────────────────────────────────────────────────

class GuideType(IntEnum):
    POINT = 0
    START = 1
    GOAL = 2
    WAYPOINT = 3


class GuideDirection(IntEnum):
    UNKNOWN = 0
    ALONG = 1
    STRAIGHT = 2
    RIGHT_30 = 3
    RIGHT_45 = 4
    RIGHT = 5
    RIGHT_135 = 6
    RIGHT_150 = 7
    UTURN = 8
    LEFT_150 = 9
    LEFT_135 = 10
    LEFT = 11
    LEFT_45 = 12
    LEFT_30 = 13


class GuideDetailCode(IntEnum):
    HIGHWAY_ENTRANCE = 32
    HIGHWAY_EXIT = 33
    HIGHWAY_SERVICE = 34
    FERRY_TERMINAL = 48


class FacilityType(IntEnum):
    SA = 1          # service area
    PA = 2          # parking area
    JUNCTION = 3
    RAMP = 4
    IC = 5          # interchange
    SMART_IC = 7


class TollGateCode(IntEnum):
    ISSUE = 1
    SETTLE = 2
    SIMPLE_GATE = 3
    SIMPLE_GATE_AND_ISSUE = 4
    SIMPLE_GATE_AND_SETTLE = 5
    UTURN_CHECK = 6
    INVALID_ISSUE = 7
    SETTLE_AND_ISSUE = 8


class EtcCode(IntEnum):
    UNSUPPORTED = 0
    GATE = 1
    ANTENNA = 2


class ShapeType(IntEnum):
    ROAD = 4
    START = 5
    END = 6


# ────────────────────────────────────────────────────────────────────────────────
# Base
# ────────────────────────────────────────────────────────────────────────────────

class _Schema(BaseModel):
    model_config = ConfigDict(
          strict=True
        , extra="ignore"
    )


# A JSON number as sent: 1320 stays 1320, 1320.0 stays 1320.0.
Number = Union[int, float]


# ────────────────────────────────────────────────────────────────────────────────
# Summary
# ────────────────────────────────────────────────────────────────────────────────

class Toll(_Schema):
    toll: Optional[Number] = None


class DateTime(_Schema):
    # yyyyMMdd
    date: Optional[str] = None
    # HHmmss
    time: Optional[str] = None


class RouteSummary(_Schema):
    total_distance: Optional[Number] = Field(default=None, alias="totalDistance")
    total_travel_time: Optional[Number] = Field(default=None, alias="totalTravelTime")
    total_toll: Optional[Toll] = Field(default=None, alias="totalToll")
    total_toll_etc: Optional[Toll] = Field(default=None, alias="totalTollEtc")
    departure_time: Optional[DateTime] = Field(default=None, alias="departureTime")
    section_time: Optional[List[Number]] = Field(default=None, alias="sectionTime")


# ────────────────────────────────────────────────────────────────────────────────
# Guide info sub-records
# ────────────────────────────────────────────────────────────────────────────────

class Point(_Schema):
    lon: Optional[Number] = None
    lat: Optional[Number] = None


class ShapePoint(_Schema):
    lon: Optional[Number] = None
    lat: Optional[Number] = None
    # elevation
    el: Optional[int] = None


class ShapeIndex(_Schema):
    shape_index: Optional[int] = Field(default=None, alias="shapeIndex")
    shape_points_index: Optional[int] = Field(default=None, alias="shapePointsIndex")


class ShapeInfo(_Schema):
    road_type: Optional[int] = Field(default=None, alias="roadType")
    data_id: Optional[int] = Field(default=None, alias="dataId")
    # Bit-packed attributes, kept raw:
    #   0 moving walkway    1 stairs       2 slope        3 escalator
    #   4 roofed            5 tunnel       6 plaza        7 elevator
    #   8-11 reserved
    #   12-15 no-entry kind
    #   16-19 one-way kind
    info: Optional[int] = None
    distance: Optional[Number] = None


class GuideDetail(_Schema):
    code: Optional[GuideDetailCode] = None
    name: Optional[str] = None


class Facility(_Schema):
    facility_type: Optional[FacilityType] = Field(default=None, alias="type")
    name: Optional[str] = None
    # Bit-packed amenities, kept raw:
    #   0-7 reserved
    #   8 toilet            9 accessible toilet   10 restaurant   11 snack bar
    #   12 shop             13 rest area          14 nap room     15 staffed desk
    #   16 information      17 showers            18 laundromat   19 public bath
    #   20 fax              21 mailbox            22 ATM          23 highway oasis
    #   24 coin car wash    25 gas station
    info: Optional[int] = None


class GuideHighway(_Schema):
    facilities: Optional[List[Facility]] = None


class GuideCrossing(_Schema):
    name: Optional[str] = None


class GuideRoad(_Schema):
    number: Optional[int] = None
    name: Optional[str] = None


class GuideToll(_Schema):
    toll_gate_code: Optional[TollGateCode] = Field(default=None, alias="tollGateCode")
    toll: Optional[int] = None
    name: Optional[str] = None


class GuideTollEtc(GuideToll):
    etc_code: Optional[EtcCode] = Field(default=None, alias="etcCode")


class GuideInfo(_Schema):
    guide_direction: Optional[GuideDirection] = Field(default=None, alias="guideDirection")
    # raw road class code; 101-108 toll roads, 200-299 ferry
    road_type: Optional[int] = Field(default=None, alias="roadType")
    distance: Optional[Number] = None
    travel_time: Optional[Number] = Field(default=None, alias="travelTime")
    guide_detail: Optional[GuideDetail] = Field(default=None, alias="guideDetail")
    guide_highway: Optional[GuideHighway] = Field(default=None, alias="guideHighway")
    guide_crossing: Optional[GuideCrossing] = Field(default=None, alias="guideCrossing")
    guide_road: Optional[GuideRoad] = Field(default=None, alias="guideRoad")
    guide_toll: Optional[GuideToll] = Field(default=None, alias="guideToll")
    guide_toll_etc: Optional[GuideTollEtc] = Field(default=None, alias="guideTollEtc")
    shape_index_first: Optional[ShapeIndex] = Field(default=None, alias="shapeIndexFirst")
    shape_index_last: Optional[ShapeIndex] = Field(default=None, alias="shapeIndexLast")
    shape: Optional[List[ShapeType]] = None
    shape_info: Optional[ShapeInfo] = Field(default=None, alias="shapeInfo")
    shape_points: Optional[List[ShapePoint]] = Field(default=None, alias="shapePoints")
    # vendor-defined ordering
    order: Optional[List[int]] = None


class Guide(_Schema):
    guide_type: Optional[GuideType] = Field(default=None, alias="type")
    guide_points: Optional[List[Point]] = Field(default=None, alias="guidePoints")
    guide_info: Optional[GuideInfo] = Field(default=None, alias="guideInfo")


# ────────────────────────────────────────────────────────────────────────────────
# Top level
# ────────────────────────────────────────────────────────────────────────────────

class RouteResult(_Schema):
    route_id: Optional[str] = Field(default=None, alias="routeId")
    status: Optional[str] = None
    # only with resulttype=1
    route_result_id: Optional[str] = Field(default=None, alias="routeResultId")
    summary: Optional[RouteSummary] = None
    guide: Optional[List[Guide]] = None


# ────────────────────────────────────────────────────────────────────────────────
# Entry points
# ────────────────────────────────────────────────────────────────────────────────

def parse_response(body: Union[bytes, str]) -> RouteResult:
    """
    Parse a ``/calcroute`` JSON body.

    Raises
    ------
    RouteSchemaError
        If the body is not JSON, not an object, or a present field has the
        wrong type. No partial result is returned.
    """
    try:
        result = RouteResult.model_validate_json(body)
    except ValidationError as exc:
        _log.error("route response rejected: %d error(s)", exc.error_count())
        raise RouteSchemaError(f"invalid route response: {exc}") from exc

    _log.debug(
        "route response parsed: status=%s guide_entries=%s",
        result.status,
        len(result.guide) if result.guide is not None else None,
    )
    return result


def dump_result(
    result: RouteResult,
    *,
    indent: Optional[int] = None,
) -> str:
    """
    Serialize back to JSON with vendor field names, only fields that were given.

    Compact single line unless `indent` is set.
    """
    return result.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)
