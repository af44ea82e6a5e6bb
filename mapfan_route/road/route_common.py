# mapfan_route/road/route_common.py
# -*- coding: utf-8 -*-
"""
Common pieces for the route client stack:
- Error classes (one per failure family, all fatal for the invocation)
- Small log/response helpers
- RouteConfig (API key, gateway host, base URL, timeouts)

This module is "pure infra": it does not perform HTTP calls; the HTTP logic
lives in mapfan_route/road/route_client.py. Keep this module side-effect free
(no init_logging here); the entry points should call init_logging().
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional, Tuple

from mapfan_route.core.config import get_route_service_defaults
from mapfan_route.infra.logging import get_logger

# ────────────────────────────────────────────────────────────────────────────────
# Errors
# ────────────────────────────────────────────────────────────────────────────────

class RouteError(Exception):
    """Base class for every failure surfaced by this package."""
    ...

class InvalidInput(RouteError):
    """Raised when CLI input cannot be used; nothing has been sent yet."""
    ...

class InvalidPosition(InvalidInput):
    """Raised when a coordinate string is not exactly two numbers."""
    ...

class MissingApiKey(RouteError):
    """Raised when the gateway API key is not configured."""
    ...

class RouteTransportError(RouteError):
    """
    Raised on network failures or any non-200 answer from the gateway.

    `status_code` is None when no HTTP response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

class RouteSchemaError(RouteError):
    """Raised when a response body does not match the route result shape."""
    ...

class OutputError(RouteError):
    """Raised when the route result cannot be written to the output file."""
    ...


# ────────────────────────────────────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────────────────────────────────────

_log = get_logger(__name__)

def _short(v: Any, maxlen: int = 420) -> str:
    """
    Safe, concise preview of a Python object. Useful in logs.
    """
    try:
        s = json.dumps(v, ensure_ascii=False)
    except (TypeError, ValueError):
        s = str(v)
    return s if len(s) <= maxlen else (s[:maxlen] + " …")


# ────────────────────────────────────────────────────────────────────────────────
# Small utils
# ────────────────────────────────────────────────────────────────────────────────

def _extract_error_text(resp) -> str:
    """
    Best-effort extraction of a human-friendly error from a HTTP response.
    """
    try:
        j = resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:500] or "<no-text>"
    if isinstance(j, dict):
        return _short(j)
    return str(j)


# ────────────────────────────────────────────────────────────────────────────────
# Config
# ────────────────────────────────────────────────────────────────────────────────

class RouteConfig:
    """
    Configuration bundle for the route client.

    Parameters
    ----------
    api_key : str | None
        If None, reads from the env var named by RouteServiceDefaults.api_key_env
        (RAPID_API_KEY).
    api_host : str | None
        Gateway host sent as X-RapidAPI-Host.
    base_url : str | None
        Gateway base URL (no trailing slash).
    connect_timeout_s : float | None
        TCP connect timeout (seconds).
    read_timeout_s : float | None
        Response/read timeout (seconds).
    user_agent : str | None
        Sent as User-Agent.

    Raises
    ------
    MissingApiKey
        If no key was passed and the environment variable is unset or blank.
    """
    def __init__(
        self,
        api_key: str | None = None,
        api_host: str | None = None,
        base_url: str | None = None,
        connect_timeout_s: float | None = None,
        read_timeout_s: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        defaults = get_route_service_defaults()

        self.api_key_env = defaults.api_key_env
        self.api_key = (api_key or os.getenv(self.api_key_env, "")).strip()
        self.api_host = str(api_host or defaults.api_host)
        self.base_url = str(base_url or defaults.base_url).rstrip("/")
        self.calc_route_path = defaults.calc_route_path
        self.connect_timeout_s = float(connect_timeout_s if connect_timeout_s is not None else defaults.connect_timeout_s)
        self.read_timeout_s = float(read_timeout_s if read_timeout_s is not None else defaults.read_timeout_s)
        self.user_agent = str(user_agent or defaults.user_agent)

        if not self.api_key:
            _log.error("RouteConfig init: %s not set", self.api_key_env)
            raise MissingApiKey(
                f"{self.api_key_env} is not set. Export {self.api_key_env} or pass api_key= to RouteConfig()."
            )

        # Concise, non-sensitive summary (never the key itself)
        _log.info(
            "RouteConfig init: base_url=%s host=%s path=%s timeouts=(%.1f,%.1f)s ua=%s",
            self.base_url,
            self.api_host,
            self.calc_route_path,
            self.connect_timeout_s,
            self.read_timeout_s,
            self.user_agent,
        )

    @property
    def timeouts(self) -> Tuple[float, float]:
        """Return (connect_timeout_s, read_timeout_s) for requests."""
        return (self.connect_timeout_s, self.read_timeout_s)
