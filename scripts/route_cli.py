#!/usr/bin/env python3
# scripts/route_cli.py
# -*- coding: utf-8 -*-

"""
Route CLI (thin wrapper around mapfan_route.road.router)
========================================================

Lets the CLI run from a checkout without installing the package.

Usage
-----
Exactly the same CLI as ``python -m mapfan_route.road.router``. For example:

    python scripts/route_cli.py route \
        --from 139.767,35.681 \
        --to   139.69,35.64 \
        --date 20221204_100000 \
        --pretty
"""

from __future__ import annotations

# ────────────────────────────────────────────────────────────────────────────────
# Path bootstrap (must be first)
# ────────────────────────────────────────────────────────────────────────────────
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]  # repo root (one level above /scripts)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# ────────────────────────────────────────────────────────────────────────────────
# Delegate to mapfan_route.road.router
# ────────────────────────────────────────────────────────────────────────────────
from mapfan_route.road.router import main as _route_main


def main(
    argv: list[str] | None = None
) -> int:
    """
    Forward CLI args directly to mapfan_route.road.router.main.
    """
    return _route_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
