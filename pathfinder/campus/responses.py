# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""JSON-ready payloads for the building list and route queries.

Payload shapes::

    buildings: {"names": {short: long}, "buildings": [{"shortName", "longName", "x", "y"}]}
    path:      {"start": {"x", "y"}, "path": [{"start", "end", "cost"}], "cost", "directions"}

A missing route is reported as the single-point path at ``(-1, -1)`` with
zero cost and no segments. Invalid names propagate as
:class:`~pathfinder.errors.InvalidArgumentError` so the transport layer can
reject the request instead of answering with the sentinel.
"""

from __future__ import annotations

from typing import Any, Dict

from pathfinder.graph.path import Path
from pathfinder.text.directions import CoordinateProperties, format_directions

from .map import CampusMap
from .records import Point

NO_PATH = Path(Point(-1, -1))


def buildings_response(campus: CampusMap) -> Dict[str, Any]:
    """Return building names and records."""

    return {
        "names": campus.building_names(),
        "buildings": [b.to_dict() for b in campus.buildings()],
    }


def path_payload(path: Path[Point]) -> Dict[str, Any]:
    """Serialize ``path`` as start point, segment list and total cost."""

    return {
        "start": path.start.to_dict(),
        "path": [
            {"start": seg.start.to_dict(), "end": seg.end.to_dict(), "cost": seg.cost}
            for seg in path
        ],
        "cost": path.cost,
    }


def path_response(
    campus: CampusMap,
    start: str,
    end: str,
    props: CoordinateProperties = CoordinateProperties.INCREASING_DOWN_RIGHT,
) -> Dict[str, Any]:
    """Return the route payload for ``start -> end`` including directions."""

    path = campus.find_shortest_path(start, end)
    if path is None:
        path = NO_PATH
    payload = path_payload(path)
    payload["directions"] = format_directions(start, end, path, props)
    return payload


__all__ = ["NO_PATH", "buildings_response", "path_payload", "path_response"]
