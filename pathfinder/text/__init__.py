# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Text rendering of routes."""

from .directions import (
    CoordinateProperties,
    Direction,
    coordinate_properties,
    format_directions,
    resolve_direction,
)

__all__ = [
    "CoordinateProperties",
    "Direction",
    "coordinate_properties",
    "format_directions",
    "resolve_direction",
]
