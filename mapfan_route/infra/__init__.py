# mapfan_route/infra/__init__.py
