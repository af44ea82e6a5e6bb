# mapfan_route/core/config.py
# -*- coding: utf-8 -*-

"""
Core configuration models and globals.

This module centralizes *pure* configuration structures that are
independent of any specific infrastructure (HTTP client, CLI, etc.).

It is meant to be safe to import from anywhere.

Current contents
----------------
- RouteServiceDefaults: endpoint, gateway host and timeout defaults
"""

from __future__ import annotations

from dataclasses import dataclass


# ────────────────────────────────────────────────────────────────────────────────
# Route service defaults (RapidAPI gateway in front of MapFan)
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RouteServiceDefaults:
    """
    Defaults for talking to the route-calculation service.

    Attributes
    ----------
    api_host : str
        Value sent in the ``X-RapidAPI-Host`` header.
    base_url : str
        Scheme + host of the gateway (no trailing slash).
    calc_route_path : str
        Endpoint path for route calculation / result lookup.
    api_key_env : str
        Environment variable holding the gateway API key.
    connect_timeout_s : float
        TCP connect timeout (seconds).
    read_timeout_s : float
        Response/read timeout (seconds).
    user_agent : str
        Sent as User-Agent.
    """

    api_host: str = "mapfanapi-route.p.rapidapi.com"
    base_url: str = "https://mapfanapi-route.p.rapidapi.com"
    calc_route_path: str = "/calcroute"
    api_key_env: str = "RAPID_API_KEY"
    connect_timeout_s: float = 8.0
    read_timeout_s: float = 30.0
    user_agent: str = "mapfan-route-cli/0.3"


# ────────────────────────────────────────────────────────────────────────────────
# Singleton-style instance
# ────────────────────────────────────────────────────────────────────────────────

ROUTE_SERVICE_DEFAULTS = RouteServiceDefaults()


def get_route_service_defaults() -> RouteServiceDefaults:
    """
    Return the global route service defaults.

    Provided as a function in case this ever needs to become dynamic
    (e.g. loaded from a file) without changing call sites.
    """
    return ROUTE_SERVICE_DEFAULTS
