# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Compass directions and turn-by-turn text for computed routes.

Summary
-------
Maps coordinate deltas to one of eight compass points and renders a
:class:`~pathfinder.graph.path.Path` as walking directions::

    Path from LIB to ENG
    \tWalk 150 feet E
    ...
    Total distance: 662 feet

Each compass point owns a 45 degree sector centred on it; sector boundaries
belong to the counter-clockwise neighbour.
"""

from __future__ import annotations

import enum
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

from pathfinder.errors import InvalidArgumentError
from pathfinder.graph.path import Path


class Direction(enum.Enum):
    E = "East"
    NE = "Northeast"
    N = "North"
    NW = "Northwest"
    W = "West"
    SW = "Southwest"
    S = "South"
    SE = "Southeast"


class CoordinateProperties(enum.Enum):
    """Orientation of the map's coordinate axes."""

    # screen/image coordinates: y grows downwards
    INCREASING_DOWN_RIGHT = "down_right"
    # cartesian coordinates: y grows upwards
    INCREASING_UP_RIGHT = "up_right"


# counter-clockwise from east, one entry per 45 degree sector
_COMPASS: Sequence[Direction] = (
    Direction.E,
    Direction.NE,
    Direction.N,
    Direction.NW,
    Direction.W,
    Direction.SW,
    Direction.S,
    Direction.SE,
)


def coordinate_properties(name: str | CoordinateProperties) -> CoordinateProperties:
    """Return the :class:`CoordinateProperties` member called ``name``."""

    if isinstance(name, CoordinateProperties):
        return name
    try:
        return CoordinateProperties[str(name).upper()]
    except KeyError as exc:
        raise InvalidArgumentError(f"unknown coordinate convention {name!r}") from exc


def resolve_direction(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    props: CoordinateProperties = CoordinateProperties.INCREASING_DOWN_RIGHT,
) -> Direction:
    """Return the compass direction of the move ``(x1, y1) -> (x2, y2)``.

    Raises
    ------
    InvalidArgumentError
        If both points are identical.
    """

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        raise InvalidArgumentError("cannot resolve a direction between identical points")
    if props is CoordinateProperties.INCREASING_DOWN_RIGHT:
        dy = -dy
    theta = math.degrees(math.atan2(dy, dx))
    return _COMPASS[int(math.floor((theta + 22.5) / 45.0)) % 8]


def _feet(value: float) -> str:
    """Round ``value`` half up to whole feet."""

    return str(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_directions(
    start_name: str,
    end_name: str,
    path: Path,
    props: CoordinateProperties = CoordinateProperties.INCREASING_DOWN_RIGHT,
) -> List[str]:
    """Return the walking directions for ``path`` between two named buildings."""

    lines = [f"Path from {start_name} to {end_name}"]
    for seg in path:
        direction = resolve_direction(seg.start.x, seg.start.y, seg.end.x, seg.end.y, props)
        lines.append(f"\tWalk {_feet(seg.cost)} feet {direction.name}")
    lines.append(f"Total distance: {_feet(path.cost)} feet")
    return lines


__all__ = [
    "CoordinateProperties",
    "Direction",
    "coordinate_properties",
    "format_directions",
    "resolve_direction",
]
