# tests/conftest.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import pytest
import requests


FULL_ROUTE: Dict[str, Any] = {
    "routeId": "R-20221204-0001",
    "status": "OK",
    "routeResultId": "a1b2c3d4e5",
    "summary": {
        "totalDistance": 10532,
        "totalTravelTime": 1843.2,
        "totalToll": {"toll": 1320.0},
        "totalTollEtc": {"toll": 1150},
        "departureTime": {"date": "20221204", "time": "100000"},
        "sectionTime": [1200, 642.7],
    },
    "guide": [
        {
            "type": 1,
            "guidePoints": [{"lon": 139.767125, "lat": 35.681236}],
            "guideInfo": {
                "guideDirection": 2,
                "roadType": 5,
                "distance": 350,
                "travelTime": 62.25,
                "shapeIndexFirst": {"shapeIndex": 0, "shapePointsIndex": 0},
                "shapeIndexLast": {"shapeIndex": 1, "shapePointsIndex": 12},
                "shape": [5, 4],
                "shapeInfo": {"roadType": 5, "dataId": 3, "info": 196624, "distance": 350},
                "shapePoints": [
                    {"lon": 139.767125, "lat": 35.681236, "el": 12},
                    {"lon": 139.765012, "lat": 35.679104, "el": 14},
                ],
                "order": [0, 2, 1],
            },
        },
        {
            "type": 0,
            "guidePoints": [{"lon": 139.7454, "lat": 35.6581}],
            "guideInfo": {
                "guideDirection": 5,
                "roadType": 101,
                "distance": 8120.25,
                "travelTime": 1400.5,
                "guideDetail": {"code": 32, "name": "霞が関入口"},
                "guideHighway": {
                    "facilities": [
                        {"type": 3, "name": "谷町JCT", "info": 0},
                        {"type": 1, "name": "大井SA", "info": 33554688},
                    ]
                },
                "guideCrossing": {"name": "桜田門"},
                "guideRoad": {"number": 1, "name": "首都高速都心環状線"},
                "guideToll": {"tollGateCode": 1, "toll": 1320, "name": "霞が関料金所"},
                "guideTollEtc": {"tollGateCode": 1, "toll": 1150, "name": "霞が関料金所", "etcCode": 2},
            },
        },
        {
            "type": 2,
            "guidePoints": [{"lon": 139.69, "lat": 35.64}],
            "guideInfo": {"guideDirection": 0, "roadType": 4, "distance": 0, "travelTime": 0.0},
        },
    ],
}


class FakeResponse:
    """Just enough of requests.Response for the client."""

    def __init__(self, status_code: int = 200, body: bytes = b"{}") -> None:
        self.status_code = status_code
        self.content = body
        self.headers: Dict[str, str] = {}

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


class FakeSession:
    """Records GET calls and replays one canned response (or raises)."""

    def __init__(
        self,
        response: Optional[FakeResponse] = None,
        *,
        exc: Optional[Exception] = None,
    ) -> None:
        self.response = response or FakeResponse()
        self.exc = exc
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def full_route() -> Dict[str, Any]:
    return json.loads(json.dumps(FULL_ROUTE))


@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setenv("RAPID_API_KEY", "test-key")
    return "test-key"


@pytest.fixture(autouse=True)
def _clean_env_and_logging(monkeypatch):
    monkeypatch.delenv("MAPFAN_LOG_LEVEL", raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def ok_session(full_route) -> FakeSession:
    return FakeSession(FakeResponse(200, json.dumps(full_route).encode("utf-8")))


@pytest.fixture
def connection_error() -> Exception:
    return requests.ConnectionError("connection refused")
