# mapfan_route/road/__init__.py
