# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Immutable weighted paths.

A :class:`Path` is the working value of the shortest-path search: the
solver keeps many paths alive at once, all sharing prefixes, so extending a
path always builds a new value and leaves the receiver untouched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Iterator, List, SupportsFloat, Tuple, TypeVar

from pathfinder.errors import InvalidArgumentError

N = TypeVar("N")


@dataclass(frozen=True)
class Segment(Generic[N]):
    """One traversed edge ``start -> end`` with its ``cost``."""

    start: N
    end: N
    cost: float


@dataclass(frozen=True)
class Path(Generic[N]):
    """Ordered, immutable sequence of segments with a cumulative cost.

    Parameters
    ----------
    start : N
        First node of the path. A path built from ``start`` alone has no
        segments and cost ``0.0``.
    segments : tuple of Segment, optional
        Traversed edges in order; normally produced by :meth:`extend`.
    cost : float, optional
        Sum of the segment costs.

    Examples
    --------
    >>> p = Path("a").extend("b", 2.0).extend("c", 3.0)
    >>> p.cost, p.end
    (5.0, 'c')
    >>> p.points()
    ['a', 'b', 'c']
    """

    start: N
    segments: Tuple[Segment[N], ...] = ()
    cost: float = 0.0

    def __post_init__(self) -> None:
        if self.start is None:
            raise InvalidArgumentError("path start cannot be None")

    @property
    def end(self) -> N:
        """Last node of the path; ``start`` when there are no segments."""

        if self.segments:
            return self.segments[-1].end
        return self.start

    def extend(self, next_node: N, edge_cost: SupportsFloat) -> Path[N]:
        """Return a new path that continues from :attr:`end` to ``next_node``.

        Raises
        ------
        InvalidArgumentError
            If ``next_node`` is ``None`` or ``edge_cost`` is not a finite,
            non-negative number.
        """

        if next_node is None:
            raise InvalidArgumentError("cannot extend a path to None")
        try:
            cost = float(edge_cost)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"edge cost {edge_cost!r} is not numeric") from exc
        if not math.isfinite(cost) or cost < 0:
            raise InvalidArgumentError(f"edge cost must be finite and non-negative, got {cost}")
        segment = Segment(self.end, next_node, cost)
        return Path(self.start, self.segments + (segment,), self.cost + cost)

    def points(self) -> List[N]:
        """Return ``start`` followed by the end node of every segment."""

        return [self.start] + [seg.end for seg in self.segments]

    def __iter__(self) -> Iterator[Segment[N]]:
        return iter(self.segments)


__all__ = ["Path", "Segment"]
