# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Campus domain: records, parsing, route cache and the map itself."""

from .cache import BoundedPathCache, MemoPathCache, PathCache, make_cache
from .map import CampusMap
from .parser import parse_campus_buildings, parse_campus_paths
from .records import CampusBuilding, CampusPath, Point
from .responses import NO_PATH, buildings_response, path_payload, path_response

__all__ = [
    "BoundedPathCache",
    "CampusBuilding",
    "CampusMap",
    "CampusPath",
    "MemoPathCache",
    "NO_PATH",
    "PathCache",
    "Point",
    "buildings_response",
    "make_cache",
    "parse_campus_buildings",
    "parse_campus_paths",
    "path_payload",
    "path_response",
]
