# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Core package for campus route finding."""

from .campus.map import CampusMap
from .errors import InvalidArgumentError, NotFoundError, ParserError, PathfinderError
from .graph import LabeledEdge, LabeledGraph, Path, Segment
from .planning import ShortestPathFinder, shortest_path

__all__ = [
    "__version__",
    "CampusMap",
    "InvalidArgumentError",
    "LabeledEdge",
    "LabeledGraph",
    "NotFoundError",
    "ParserError",
    "Path",
    "PathfinderError",
    "Segment",
    "ShortestPathFinder",
    "shortest_path",
]
__version__ = "0.1.0"
