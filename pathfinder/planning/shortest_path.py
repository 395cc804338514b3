# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
from __future__ import annotations

import heapq
import itertools
import logging
from typing import Generic, List, Optional, Set, Tuple, TypeVar

from pathfinder.graph.labeled_graph import LabeledGraph
from pathfinder.graph.path import Path

N = TypeVar("N")
L = TypeVar("L")

_log = logging.getLogger(__name__)


class ShortestPathFinder(Generic[N, L]):
    """Dijkstra search operating on a :class:`LabeledGraph`.

    Edge labels are converted with ``float()`` to obtain their cost. All
    costs must be non-negative; this is a precondition of the algorithm and
    not re-checked here beyond what :meth:`Path.extend` enforces.
    """

    def __init__(self, graph: LabeledGraph[N, L]) -> None:
        self.graph = graph

    def find(self, start: N, end: N) -> Optional[Path[N]]:
        """Return a minimum-cost path from ``start`` to ``end``.

        Parameters
        ----------
        start:
            Source node; must be in the graph.
        end:
            Destination node; must be in the graph.

        Returns
        -------
        Path or None
            Cheapest path, or ``None`` if ``end`` is unreachable.

        Complexity
        ----------
        ``O((V + E) log V)`` with a binary heap.
        """

        # heap entries: (cost, insertion order, path); the counter keeps
        # ties in queue order and stops heapq from comparing paths
        counter = itertools.count()
        fringe: List[Tuple[float, int, Path[N]]] = [(0.0, next(counter), Path(start))]
        finished: Set[N] = set()
        while fringe:
            _, _, min_path = heapq.heappop(fringe)
            min_dest = min_path.end
            if min_dest == end:
                return min_path
            if min_dest in finished:
                continue
            finished.add(min_dest)
            for edge in sorted(self.graph.edges_from(min_dest)):
                if edge.dst in finished:
                    continue
                new_path = min_path.extend(edge.dst, float(edge.label))
                heapq.heappush(fringe, (new_path.cost, next(counter), new_path))
        _log.debug("no path from %s to %s (%d nodes settled)", start, end, len(finished))
        return None


def shortest_path(graph: LabeledGraph[N, L], start: N, end: N) -> Optional[Path[N]]:
    """Convenience wrapper around :meth:`ShortestPathFinder.find`."""

    return ShortestPathFinder(graph).find(start, end)


__all__ = ["ShortestPathFinder", "shortest_path"]
