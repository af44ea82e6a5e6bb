# mapfan_route/addressing/__init__.py
