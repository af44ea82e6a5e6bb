# tests/test_route_params.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from mapfan_route.core.models import Position
from mapfan_route.road.route_params import (
      CarType
    , Ferry
    , MODIFIER_KEYS
    , OnOff
    , OutputFormat
    , Priority
    , RouteParams
    , Tollway
    , VehicleType
    , build_lookup_params
    , build_params
)

TOKYO = Position(longitude=139.767, latitude=35.681)
SHIBUYA = Position(longitude=139.69, latitude=35.64)


def test_onoff_should_be_number():
    assert RouteParams.new(TOKYO, SHIBUYA).toll_road_restriction(OnOff.ON).to_params() == [
          ("start", "139.767,35.681")
        , ("destination", "139.69,35.64")
        , ("tollroad", "1")
    ]
    assert RouteParams.new(TOKYO, SHIBUYA).toll_road_restriction(OnOff.OFF).to_params() == [
          ("start", "139.767,35.681")
        , ("destination", "139.69,35.64")
        , ("tollroad", "0")
    ]


def test_bool_flags_render_as_one_and_zero():
    pairs = build_params(TOKYO, SHIBUYA, tolltarget=True, danger=False)
    assert pairs[2:] == [("tolltarget", "1"), ("danger", "0")]


def test_date_is_passed_through():
    params = RouteParams.new(TOKYO, SHIBUYA).departure("20221204_100000")
    assert params.to_params() == [
          ("start", "139.767,35.681")
        , ("destination", "139.69,35.64")
        , ("date", "20221204_100000")
    ]


def test_record_without_positions_or_result_id_is_rejected():
    with pytest.raises(ValueError):
        RouteParams()
    with pytest.raises(ValueError):
        RouteParams(start="139.767,35.681")
    assert RouteParams.with_result_id("abc").is_lookup


def test_date_format_not_checked_by_builder():
    pairs = RouteParams.new(TOKYO, SHIBUYA).departure("tomorrow").to_params()
    assert ("date", "tomorrow") in pairs


def test_only_start_and_destination_by_default():
    assert build_params(TOKYO, SHIBUYA) == [
          ("start", "139.767,35.681")
        , ("destination", "139.69,35.64")
    ]


def test_result_id_suppresses_everything_else():
    params = (
        RouteParams.new(TOKYO, SHIBUYA)
        .vehicle_type(VehicleType.BIG_CARGO)
        .departure("20221204_100000")
        .via_points("139.7,35.66")
    )
    params.routeresultid = "abc123"
    assert params.to_params() == [("routeresultid", "abc123")]


def test_lookup_mode():
    params = RouteParams.with_result_id("abc123")
    assert params.is_lookup
    assert params.start == ""
    assert build_lookup_params("abc123") == [("routeresultid", "abc123")]


def test_setters_chain_and_return_same_object():
    params = RouteParams.new(TOKYO, SHIBUYA)
    assert params.car_type(CarType.NORMAL) is params
    assert params.result_type(OnOff.ON).vehicle_type(VehicleType.BIG) is params


def test_all_modifiers_in_declared_order():
    params = RouteParams.new(TOKYO, SHIBUYA)
    # set in reverse to make sure emission order does not follow call order
    (
        params
        .output_format(OutputFormat.JSON)
        .result_type(OnOff.ON)
        .travel_route(OnOff.OFF)
        .oneway_regulations(OnOff.ON)
        .toll_road_restriction(OnOff.ON)
        .general_road_restriction()
        .daytime_restriction()
        .dangerous_cargo()
        .dimensions(height=380, loadage=10000, weight=20000, width=249)
        .vehicle_type(VehicleType.BIG_CARGO)
        .speeds(normal=40.0, highway=80.0, tollway=70.0, ferry=20.0)
        .car_type(CarType.BIG)
        .toll_target(1)
        .use_etc(OnOff.ON)
        .smart_ic(OnOff.OFF)
        .ferry_preference(Ferry.AVOID)
        .tollway_preference(Tollway.PRIORITY)
        .route_priority(Priority.DISTANCE_FIRST)
        .departure("20221204_100000")
        .via_points("139.7,35.66,0,1")
        .start_angle(90)
    )
    pairs = params.to_params()
    keys = [k for k, _ in pairs]
    assert keys == ["start", "destination", *MODIFIER_KEYS]
    assert len(set(keys)) == len(keys)
    assert all(v != "" for _, v in pairs)
    assert dict(pairs)["cartype"] == "3"
    assert dict(pairs)["vehicletype"] == "2"
    assert dict(pairs)["ferry"] == "2"
    assert dict(pairs)["smartic"] == "0"
    assert dict(pairs)["fmt"] == "json"


def test_enums_render_as_codes_not_names():
    pairs = dict(
        build_params(
              TOKYO
            , SHIBUYA
            , priority=Priority.WALKER_LESS_STEPS
            , vehicletype=VehicleType.BIG_SPECIAL
            , fmt=OutputFormat.XML
        )
    )
    assert pairs["priority"] == "103"
    assert pairs["vehicletype"] == "11"
    assert pairs["fmt"] == "xml"


def test_numbers_use_short_form():
    pairs = dict(
        RouteParams.new(TOKYO, SHIBUYA)
        .speeds(normal=40.0, highway=80.5)
        .dimensions(height=380)
        .to_params()
    )
    assert pairs["normalspeed"] == "40"
    assert pairs["highwayspeed"] == "80.5"
    assert pairs["height"] == "380"
    assert "tollwayspeed" not in pairs
    assert "width" not in pairs


def test_build_params_treats_none_as_unset():
    pairs = build_params(TOKYO, SHIBUYA, via=None, date="20221204_100000")
    assert [k for k, _ in pairs] == ["start", "destination", "date"]


def test_build_params_rejects_unknown_modifier():
    with pytest.raises(TypeError):
        build_params(TOKYO, SHIBUYA, speed=40)
    with pytest.raises(TypeError):
        build_params(TOKYO, SHIBUYA, routeresultid="abc")


def test_position_formatting():
    assert Position(139.0, 35.5).as_param() == "139,35.5"
    assert Position(-0.1276, 51.5072).as_param() == "-0.1276,51.5072"
