# mapfan_route/__init__.py
# -*- coding: utf-8 -*-
"""Command-line client for the MapFan route-calculation API (RapidAPI gateway)."""

__version__ = "0.3.0"
