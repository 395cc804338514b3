# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Generic directed graph with labeled edges.

Summary
-------
Implements ``LabeledGraph``, a mutable adjacency structure mapping every
node to the set of its outgoing :class:`LabeledEdge` values. Node and label
are independent type parameters: the campus map stores ``Point`` nodes with
``float`` distances while the script driver stores string nodes.

Invariants
----------
* the node set equals the key set of the adjacency mapping;
* every edge points at a node of the graph;
* ``None`` (and ``""``) is never stored as a node, ``None`` never as a label;
* at most one edge per ``(src, dst, label)`` triple.

Complexity
----------
Node and edge insertion are ``O(1)``; :meth:`LabeledGraph.nodes` is
``O(V log V)``; :meth:`LabeledGraph.edge_count` is linear in the out-degree.

Examples
--------
>>> g = LabeledGraph()
>>> g.add_node("a"); g.add_node("b")
True
True
>>> g.add_edge("a", "b", 1.5)
True
>>> g.children("a")
['b(1.5)']

See Also
--------
pathfinder.graph.path
pathfinder.planning.shortest_path
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, FrozenSet, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from pathfinder.errors import InvalidArgumentError

N = TypeVar("N", bound=Hashable)
L = TypeVar("L")


def _less(a: Any, b: Any) -> bool:
    """Natural ``a < b`` with a ``repr`` fallback for unordered values."""

    try:
        return bool(a < b)
    except TypeError:
        return repr(a) < repr(b)


def sort_nodes(nodes: Iterable[N]) -> List[N]:
    """Return ``nodes`` in a reproducible order.

    Nodes are sorted by their natural ordering when they have one, otherwise
    by ``repr``. Hash values never influence the result. The fallback is
    only reproducible for node types with a value-based ``repr``; the
    default ``object.__repr__`` embeds the memory address.
    """

    items = list(nodes)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


@total_ordering
@dataclass(frozen=True)
class LabeledEdge(Generic[N, L]):
    """Immutable directed edge ``src -> dst`` carrying ``label``.

    Two edges are equal iff source, destination and label are equal. Edges
    rank by destination first and by label when destinations coincide.
    """

    src: N
    dst: N
    label: L

    def __post_init__(self) -> None:
        if self.src is None or self.dst is None or self.label is None:
            raise InvalidArgumentError("edge endpoints and label cannot be None")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LabeledEdge):
            return NotImplemented
        if self == other:
            return False
        if self.dst == other.dst:
            return _less(self.label, other.label)
        return _less(self.dst, other.dst)

    def __str__(self) -> str:
        return f"{self.src} -> {self.dst} ({self.label})"


class LabeledGraph(Generic[N, L]):
    """Mutable directed graph whose edges carry comparable labels.

    Summary
    -------
    Nodes are kept as keys of an adjacency mapping; each maps to the set of
    its outgoing edges. Parallel edges between the same pair of nodes are
    allowed as long as their labels differ. Cycles and self loops are
    allowed.

    Parameters
    ----------
    debug : bool, optional
        When ``True`` run :meth:`check_rep` after every mutation. Intended
        for tests; the check is linear in the graph size.

    Side Effects
    ------------
    None outside the instance. Callers only ever receive snapshots of edge
    sets, never the live containers.
    """

    def __init__(self, *, debug: bool = False) -> None:
        # adjacency list: node -> outgoing edges
        self._adjacency: Dict[N, Set[LabeledEdge[N, L]]] = {}
        self._debug = debug

    # ------------------------------------------------------------------
    # Validation helpers
    @staticmethod
    def _validate_node(node: Any) -> None:
        if node is None or (isinstance(node, str) and not node):
            raise InvalidArgumentError("node cannot be None or empty")

    def _require(self, *nodes: Any) -> None:
        for node in nodes:
            self._validate_node(node)
            if node not in self._adjacency:
                raise InvalidArgumentError(f"node {node!r} is not in the graph")

    def _after_mutation(self) -> None:
        if self._debug:
            self.check_rep()

    # ------------------------------------------------------------------
    # Mutation
    def add_node(self, node: N) -> bool:
        """Insert ``node`` if absent.

        Returns
        -------
        bool
            ``True`` iff the node was newly inserted.

        Raises
        ------
        InvalidArgumentError
            If ``node`` is ``None`` or an empty string.
        """

        self._validate_node(node)
        if node in self._adjacency:
            return False
        self._adjacency[node] = set()
        self._after_mutation()
        return True

    def add_edge(self, src: N, dst: N, label: L) -> bool:
        """Insert the edge ``src -> dst`` labeled ``label``.

        Summary
        -------
        Both endpoints must already be nodes; they are never created
        implicitly. No reverse edge is added.

        Parameters
        ----------
        src, dst : N
            Existing endpoints.
        label : L
            Edge label; must not be ``None``.

        Returns
        -------
        bool
            ``True`` iff no equal edge existed and the edge was inserted.

        Raises
        ------
        InvalidArgumentError
            If an endpoint is missing or ``label`` is ``None``.
        """

        self._require(src, dst)
        if label is None:
            raise InvalidArgumentError("edge label cannot be None")
        edges = self._adjacency[src]
        edge = LabeledEdge(src, dst, label)
        if edge in edges:
            return False
        edges.add(edge)
        self._after_mutation()
        return True

    def remove_edge(self, src: N, dst: N, label: L) -> Optional[LabeledEdge[N, L]]:
        """Remove and return the edge ``src -> dst`` labeled ``label``.

        Returns ``None`` when no such edge exists. Raises
        :class:`InvalidArgumentError` if either endpoint is missing.
        """

        self._require(src, dst)
        if label is None:
            raise InvalidArgumentError("edge label cannot be None")
        edge = LabeledEdge(src, dst, label)
        edges = self._adjacency[src]
        if edge not in edges:
            return None
        edges.remove(edge)
        self._after_mutation()
        return edge

    # ------------------------------------------------------------------
    # Queries
    def edges_from(self, node: N) -> FrozenSet[LabeledEdge[N, L]]:
        """Return a snapshot of the edges leaving ``node``."""

        self._require(node)
        return frozenset(self._adjacency[node])

    def children(self, node: N) -> List[str]:
        """Return sorted ``"dst(label)"`` descriptions of ``node``'s edges."""

        return sorted({f"{e.dst}({e.label})" for e in self.edges_from(node)})

    def contains(self, node: Any) -> bool:
        """Return ``True`` iff ``node`` is in the graph."""

        if node is None:
            return False
        return node in self._adjacency

    __contains__ = contains

    def node_count(self) -> int:
        """Return the number of nodes."""

        return len(self._adjacency)

    __len__ = node_count

    def nodes(self) -> List[N]:
        """Return all nodes in deterministic order (see :func:`sort_nodes`)."""

        return sort_nodes(self._adjacency)

    def edge_count(self, n1: N, n2: N) -> int:
        """Return the number of edges from ``n1`` to ``n2``."""

        self._require(n1, n2)
        return sum(1 for edge in self._adjacency[n1] if edge.dst == n2)

    def total_edges(self) -> int:
        """Return the number of edges in the whole graph."""

        return sum(len(edges) for edges in self._adjacency.values())

    # ------------------------------------------------------------------
    # Representation invariant
    def check_rep(self) -> None:
        """Raise ``RuntimeError`` if a representation invariant is violated."""

        for node, edges in self._adjacency.items():
            if node is None:
                raise RuntimeError("graph contains a None node")
            if edges is None:
                raise RuntimeError(f"node {node!r} has no edge set")
            for edge in edges:
                if edge.src != node:
                    raise RuntimeError(f"edge {edge} stored under {node!r}")
                if edge.dst not in self._adjacency:
                    raise RuntimeError(f"edge {edge} points outside the graph")
                if edge.label is None:
                    raise RuntimeError(f"edge {edge} has no label")

    def __repr__(self) -> str:
        return f"LabeledGraph(nodes={self.node_count()}, edges={self.total_edges()})"


__all__ = ["LabeledEdge", "LabeledGraph", "sort_nodes"]
