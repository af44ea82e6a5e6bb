# mapfan_route/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses).

    - Position: a (longitude, latitude) pair as sent to the route service

This module deliberately has no HTTP and no CLI imports.
It is safe to import from anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from mapfan_route.core.types import LonLatPair


def format_number(value: float) -> str:
    """
    Shortest text form of a number: ``40.0`` → ``"40"``, ``139.767`` → ``"139.767"``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ────────────────────────────────────────────────────────────────────────────────
# Basic geographic point
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Position:
    """
    A geographic point in the service's axis order.

    Attributes
    ----------
    longitude : float
        Longitude in decimal degrees.
    latitude : float
        Latitude in decimal degrees.

    No range check is applied; the service decides what it accepts.
    """

    longitude: float
    latitude: float

    def as_param(self) -> str:
        """Render as ``"lon,lat"`` for the ``start`` / ``destination`` keys."""
        return f"{format_number(self.longitude)},{format_number(self.latitude)}"

    def as_pair(self) -> LonLatPair:
        return (self.longitude, self.latitude)
