# mapfan_route/core/__init__.py
