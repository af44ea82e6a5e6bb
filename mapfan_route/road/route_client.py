# mapfan_route/road/route_client.py
# -*- coding: utf-8 -*-
"""
Concrete HTTP client for the route service behind the RapidAPI gateway:
- Centralizes HTTP (session, gateway headers, timeouts)
- One GET per call: no retries, no cache
- Maps failures to RouteTransportError / RouteSchemaError
- Emits standardized, high-signal logs for observability

Notes
-----
• Keep infra knobs in RouteConfig (timeouts, host, UA).
• Any status other than 200 is fatal for the call; the message carries the
  status and an excerpt of the body.
• Entry points should call init_logging(); this module only fetches the logger.
"""

from __future__ import annotations

import time as _time
from typing import Optional as _Optional, Tuple as _Tuple

import requests as _req

from mapfan_route.core.types import QueryPairs
from mapfan_route.infra.logging import get_logger
from .route_common import (
      _extract_error_text
    , RouteConfig
    , RouteTransportError
)
from .route_params import RouteParams
from .route_schema import RouteResult, parse_response

_log = get_logger(__name__)


class RouteClient:
    """
    Prefer: RouteClient(cfg=RouteConfig(...)) or RouteClient.from_env().

    Usable as a context manager; the session is closed on exit.
    """

    def __init__(
        self,
        *,
        cfg: RouteConfig | None = None,
        session: _req.Session | None = None,
    ) -> None:
        self.cfg = cfg or RouteConfig()
        self.base_url = self.cfg.base_url

        self._sess = session or _req.Session()
        self._sess.headers.update(
            {
                  "X-RapidAPI-Key": self.cfg.api_key
                , "X-RapidAPI-Host": self.cfg.api_host
                , "User-Agent": self.cfg.user_agent
                , "Accept": "application/json"
            }
        )

        _log.debug(
            "RouteClient ready base=%s host=%s ct=%.1fs rt=%.1fs",
              self.base_url
            , self.cfg.api_host
            , self.cfg.connect_timeout_s
            , self.cfg.read_timeout_s
        )

    # ────────────────────────────────────────────────────────────────────────
    # Lifecycle helpers
    # ────────────────────────────────────────────────────────────────────────
    @classmethod
    def from_env(cls) -> "RouteClient":
        """Convenience ctor that pulls RAPID_API_KEY from env."""
        return cls(cfg=RouteConfig())

    def close(self) -> None:
        """Explicitly close the underlying HTTP session."""
        self._sess.close()

    def __enter__(self) -> "RouteClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ────────────────────────────────────────────────────────────────────────
    # Core HTTP layer
    # ────────────────────────────────────────────────────────────────────────
    def perform_get(
        self,
        path: str,
        params: _Optional[QueryPairs] = None,
    ) -> _Tuple[int, bytes]:
        """
        Issue one GET and return (status_code, body_bytes).

        Parameters
        ----------
        path : str
            Endpoint path starting with "/".
        params : list[(str, str)] | None
            Ordered query pairs; percent-encoding is done by requests.

        Raises
        ------
        RouteTransportError
            On connection errors and timeouts (no HTTP response at all).
        """
        url = f"{self.base_url}{path}"
        t0 = _time.time()
        try:
            resp = self._sess.get(url, params=params, timeout=self.cfg.timeouts)
        except _req.RequestException as e:
            dt_ms = (_time.time() - t0) * 1000.0
            _log.error(
                "HTTP GET %s — request exception %s after %.0f ms",
                  path
                , type(e).__name__
                , dt_ms
            )
            raise RouteTransportError(f"GET {path} failed: {type(e).__name__}: {e}") from e

        dt_ms = (_time.time() - t0) * 1000.0
        body = resp.content or b""
        _log.info(
            "HTTP GET %s — %s (%.0f ms, %s B)",
              path
            , resp.status_code
            , dt_ms
            , len(body)
        )

        if resp.status_code != 200:
            msg = _extract_error_text(resp)
            _log.error("HTTP GET %s — %s body=%s", path, resp.status_code, msg)
            raise RouteTransportError(
                  f"GET {path} returned HTTP {resp.status_code}: {msg}"
                , status_code=resp.status_code
                , detail=msg
            )

        return resp.status_code, body

    # ────────────────────────────────────────────────────────────────────────
    # Route calls
    # ────────────────────────────────────────────────────────────────────────
    def calc_route(self, params: RouteParams) -> RouteResult:
        """
        Run one route calculation (or result lookup) and parse the answer.

        Raises
        ------
        RouteTransportError
            Network failure or non-200 status.
        RouteSchemaError
            Body is not a valid route result.
        """
        pairs = params.to_params()
        if params.is_lookup:
            _log.info("ROUTE lookup routeresultid=%s", params.routeresultid)
        else:
            _log.info(
                "ROUTE start=%s destination=%s modifiers=%s",
                  params.start
                , params.destination
                , [k for k, _ in pairs[2:]]
            )

        _, body = self.perform_get(self.cfg.calc_route_path, pairs)
        result = parse_response(body)

        _log.info(
            "ROUTE ok status=%s dist=%s time=%s guides=%s",
              result.status
            , result.summary.total_distance if result.summary else None
            , result.summary.total_travel_time if result.summary else None
            , len(result.guide) if result.guide is not None else 0
        )
        return result


__all__ = ["RouteClient", "RouteConfig"]
