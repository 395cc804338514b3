# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Campus map built from building and path records.

Summary
-------
Builds a ``LabeledGraph[Point, float]`` once from parsed records, indexes
buildings by short name and answers name-based shortest-path queries.
Answers are memoized per ordered ``(start, end)`` pair in a
:class:`~pathfinder.campus.cache.PathCache`; ``None`` ("no path") is cached
like any other outcome.

Each path record contributes exactly one directed edge. Data files are
expected to carry a reverse record for every two-way path; missing reverse
records stay one-way and are reported at ``DEBUG`` level.

Side Effects
------------
Construction logs a summary line. Queries update :class:`QueryStats`.

Complexity
----------
Construction is linear in the number of records; a cache miss costs one
Dijkstra run, ``O((V + E) log V)``; a hit is ``O(1)``.

Examples
--------
>>> from pathfinder.campus.records import CampusBuilding, CampusPath
>>> campus = CampusMap(
...     [CampusBuilding("A", "Alpha", 0, 0), CampusBuilding("B", "Beta", 3, 4)],
...     [CampusPath(0, 0, 3, 4, 5.0), CampusPath(3, 4, 0, 0, 5.0)],
... )
>>> campus.find_shortest_path("A", "B").cost
5.0

See Also
--------
pathfinder.planning.shortest_path
pathfinder.campus.responses
"""

from __future__ import annotations

import logging
import math
import time
from pathlib import Path as FilePath
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pathfinder.common.telemetry import QueryStats
from pathfinder.config import resolve_data_path
from pathfinder.errors import InvalidArgumentError, NotFoundError
from pathfinder.graph.labeled_graph import LabeledGraph
from pathfinder.graph.path import Path
from pathfinder.planning.shortest_path import ShortestPathFinder

from .cache import MemoPathCache, PathCache, make_cache
from .parser import parse_campus_buildings, parse_campus_paths
from .records import CampusBuilding, CampusPath, Point

_log = logging.getLogger(__name__)


class CampusMap:
    """Read-only campus graph with memoized route queries.

    Parameters
    ----------
    buildings:
        Building records; short names and coordinates must be unique.
    paths:
        Directed path records with non-negative distances.
    cache:
        Route cache, by default an unbounded :class:`MemoPathCache`.
    stats:
        Telemetry sink, by default a fresh :class:`QueryStats`.

    Raises
    ------
    InvalidArgumentError
        On duplicate short names, two buildings sharing a point, or a
        negative or non-finite path distance.
    """

    def __init__(
        self,
        buildings: Iterable[CampusBuilding],
        paths: Iterable[CampusPath],
        *,
        cache: Optional[PathCache] = None,
        stats: Optional[QueryStats] = None,
    ) -> None:
        self._graph: LabeledGraph[Point, float] = LabeledGraph()
        self._short_name_to_point: Dict[str, Point] = {}
        self._point_to_building: Dict[Point, CampusBuilding] = {}
        self._cache: PathCache = cache if cache is not None else MemoPathCache()
        self.stats = stats if stats is not None else QueryStats()
        self._finder: ShortestPathFinder[Point, float] = ShortestPathFinder(self._graph)

        for building in buildings:
            self._add_building(building)
        records = list(paths)
        for record in records:
            self._add_path(record)
        one_way = sum(1 for r in records if self._graph.edge_count(r.end, r.start) == 0)
        if one_way:
            _log.debug("%d path records have no reverse record and stay one-way", one_way)
        _log.info(
            "campus map built: buildings=%d nodes=%d edges=%d",
            len(self._short_name_to_point),
            self._graph.node_count(),
            self._graph.total_edges(),
        )
        self._check_rep()

    # ------------------------------------------------------------------
    # Construction
    @classmethod
    def from_files(
        cls,
        buildings_path: str | FilePath,
        paths_path: str | FilePath,
        **kwargs: Any,
    ) -> "CampusMap":
        """Build a map from ``campus_buildings.tsv``/``campus_paths.tsv`` files."""

        return cls(parse_campus_buildings(buildings_path), parse_campus_paths(paths_path), **kwargs)

    @classmethod
    def from_config(cls, cfg: Any, **kwargs: Any) -> "CampusMap":
        """Build a map from the ``data`` and ``cache`` sections of ``cfg``."""

        kwargs.setdefault("cache", make_cache(int(cfg.cache.max_entries)))
        return cls.from_files(
            resolve_data_path(cfg.data.buildings),
            resolve_data_path(cfg.data.paths),
            **kwargs,
        )

    def _add_building(self, building: CampusBuilding) -> None:
        name = building.short_name
        if not name:
            raise InvalidArgumentError("building short name cannot be empty")
        if name in self._short_name_to_point:
            raise InvalidArgumentError(f"duplicate building short name {name!r}")
        point = building.point
        other = self._point_to_building.get(point)
        if other is not None:
            raise InvalidArgumentError(
                f"buildings {other.short_name!r} and {name!r} share the point {point}"
            )
        self._short_name_to_point[name] = point
        self._point_to_building[point] = building
        self._graph.add_node(point)

    def _add_path(self, record: CampusPath) -> None:
        distance = float(record.distance)
        if not math.isfinite(distance) or distance < 0:
            raise InvalidArgumentError(f"path distance must be finite and non-negative: {record}")
        start, end = record.start, record.end
        self._graph.add_node(start)
        self._graph.add_node(end)
        # one directed edge per record; reverse travel needs its own record
        self._graph.add_edge(start, end, distance)

    def _check_rep(self) -> None:
        if len(self._short_name_to_point) != len(self._point_to_building):
            raise RuntimeError("short name index and point index differ in size")

    # ------------------------------------------------------------------
    # Name queries
    def short_name_exists(self, short_name: str) -> bool:
        """Return ``True`` iff ``short_name`` names a building."""

        return short_name in self._short_name_to_point

    def long_name_for(self, short_name: str) -> str:
        """Return the long name of ``short_name``.

        Raises
        ------
        NotFoundError
            If ``short_name`` is not registered.
        """

        point = self._short_name_to_point.get(short_name)
        if point is None:
            raise NotFoundError(f"unknown building short name {short_name!r}")
        return self._point_to_building[point].long_name

    def building_names(self) -> Dict[str, str]:
        """Return ``short name -> long name`` for every building."""

        return {name: self.long_name_for(name) for name in sorted(self._short_name_to_point)}

    def buildings(self) -> List[CampusBuilding]:
        """Return all building records sorted by short name."""

        return sorted(self._point_to_building.values(), key=lambda b: b.short_name)

    def point_for(self, short_name: str) -> Point:
        """Return the coordinate of ``short_name``."""

        self._validate_name(short_name, "building")
        return self._short_name_to_point[short_name]

    def node_count(self) -> int:
        return self._graph.node_count()

    def edge_count(self) -> int:
        return self._graph.total_edges()

    # ------------------------------------------------------------------
    # Route queries
    def _validate_name(self, name: Optional[str], role: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"{role} building name cannot be empty")
        if name not in self._short_name_to_point:
            raise InvalidArgumentError(f"unknown {role} building {name!r}")

    def find_shortest_path(self, start_short_name: str, end_short_name: str) -> Optional[Path[Point]]:
        """Return the shortest route between two buildings.

        Summary
        -------
        Validates both names, then serves the ordered pair from the cache or
        runs the solver and caches its outcome. ``(A, B)`` and ``(B, A)``
        are separate cache entries because the graph is directed.

        Parameters
        ----------
        start_short_name, end_short_name : str
            Short names of registered buildings.

        Returns
        -------
        Path or None
            Cheapest route, or ``None`` if the buildings are disconnected.

        Raises
        ------
        InvalidArgumentError
            If either name is ``None``, empty or unknown.
        """

        self._validate_name(start_short_name, "start")
        self._validate_name(end_short_name, "end")
        key: Tuple[str, str] = (start_short_name, end_short_name)
        solved = False

        def _solve() -> Optional[Path[Point]]:
            nonlocal solved
            solved = True
            t0 = time.perf_counter()
            result = self._finder.find(
                self._short_name_to_point[start_short_name],
                self._short_name_to_point[end_short_name],
            )
            latency_ms = (time.perf_counter() - t0) * 1000.0
            self.stats.record_solve(found=result is not None, latency_ms=latency_ms)
            _log.debug(
                "solved %s -> %s in %.2f ms: %s",
                start_short_name,
                end_short_name,
                latency_ms,
                "no path" if result is None else f"cost {result.cost:.1f}",
            )
            return result

        path = self._cache.compute_if_absent(key, _solve)
        self.stats.record_request(hit=not solved)
        return path

    def log_status(self) -> dict:
        """Return query counters and the current cache size."""

        status = self.stats.snapshot()
        status["cached_routes"] = len(self._cache)
        return status


__all__ = ["CampusMap"]
