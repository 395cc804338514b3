# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Value types for campus buildings, path segments and coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, order=True)
class Point:
    """Exact 2-D coordinate used as a graph node.

    Equality is exact; no tolerance or snapping is applied. Points order by
    ``(x, y)`` which gives the graph a reproducible node order.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class CampusBuilding:
    """A named point of interest.

    Parameters
    ----------
    short_name:
        Compact identifier used in queries, e.g. ``"LIB"``.
    long_name:
        Human readable display name.
    x, y:
        Map coordinates of the entrance.
    """

    short_name: str
    long_name: str
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> Dict[str, object]:
        return {
            "shortName": self.short_name,
            "longName": self.long_name,
            "x": float(self.x),
            "y": float(self.y),
        }


@dataclass(frozen=True)
class CampusPath:
    """Walkable segment from ``(x1, y1)`` to ``(x2, y2)`` of length ``distance``.

    A record describes one direction of travel. Data files list the
    reverse direction as a separate record.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    distance: float

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)


__all__ = ["Point", "CampusBuilding", "CampusPath"]
