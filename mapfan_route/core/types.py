# mapfan_route/core/types.py
# -*- coding: utf-8 -*-

"""
Shared type aliases.

This module centralizes common typing helpers so they can be imported
everywhere without creating circular dependencies.

Contents
--------
- LonLatPair: (lon, lat) as a tuple
- QueryPair / QueryPairs: ordered query-string key/value pairs
"""

from __future__ import annotations

from typing import List, Tuple


# ────────────────────────────────────────────────────────────────────────────────
# Geographic + query helpers
# ────────────────────────────────────────────────────────────────────────────────

LonLatPair = Tuple[float, float]
"""Simple (lon, lat) pair in decimal degrees. Note the order: longitude first."""

QueryPair = Tuple[str, str]
"""One query-string entry, not yet percent-encoded."""

QueryPairs = List[QueryPair]
"""Ordered query-string entries with unique keys."""
