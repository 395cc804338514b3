# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Memoization layer for computed routes.

Summary
-------
``CampusMap`` stores every answered query in a :class:`PathCache`. The
default :class:`MemoPathCache` never evicts; :class:`BoundedPathCache` keeps
at most ``max_entries`` pairs in least-recently-used order. Both hold a lock
across the check-then-insert sequence of :meth:`compute_if_absent`, so two
threads never solve the same key twice.

Cached values may be ``None`` (a valid "no path" outcome); a private
sentinel distinguishes that from an absent key.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, Dict, Hashable, Optional, Protocol, TypeVar

from pathfinder.errors import InvalidArgumentError

V = TypeVar("V")

_MISSING = object()
_log = logging.getLogger(__name__)


class PathCache(Protocol):
    """Interface expected by :class:`~pathfinder.campus.map.CampusMap`."""

    def get(self, key: Hashable, default: Optional[object] = None) -> object:
        ...

    def compute_if_absent(self, key: Hashable, compute: Callable[[], V]) -> V:
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def __len__(self) -> int:
        ...


class MemoPathCache:
    """Unbounded, append-only cache."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, object] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Optional[object] = None) -> object:
        with self._lock:
            return self._data.get(key, default)

    def compute_if_absent(self, key: Hashable, compute: Callable[[], V]) -> V:
        """Return the value for ``key``, computing and storing it on a miss."""

        with self._lock:
            value = self._data.get(key, _MISSING)
            if value is _MISSING:
                value = compute()
                self._data[key] = value
            return value  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class BoundedPathCache:
    """Least-recently-used cache holding at most ``max_entries`` keys."""

    def __init__(self, max_entries: int) -> None:
        if max_entries <= 0:
            raise InvalidArgumentError("max_entries must be positive")
        self.max_entries = max_entries
        self._data: "OrderedDict[Hashable, object]" = OrderedDict()
        self._lock = threading.Lock()
        self.evictions = 0

    def get(self, key: Hashable, default: Optional[object] = None) -> object:
        with self._lock:
            if key not in self._data:
                return default
            self._data.move_to_end(key)
            return self._data[key]

    def compute_if_absent(self, key: Hashable, compute: Callable[[], V]) -> V:
        """Return the value for ``key``; on a miss compute, store and evict."""

        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                return self._data[key]  # type: ignore[return-value]
            value = compute()
            self._data[key] = value
            while len(self._data) > self.max_entries:
                old, _ = self._data.popitem(last=False)
                self.evictions += 1
                _log.debug("evicted cached route %s", old)
            return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def make_cache(max_entries: int = 0) -> PathCache:
    """Return an unbounded cache for ``max_entries == 0``, else an LRU cache."""

    if max_entries < 0:
        raise InvalidArgumentError("max_entries cannot be negative")
    if max_entries == 0:
        return MemoPathCache()
    return BoundedPathCache(max_entries)


__all__ = ["PathCache", "MemoPathCache", "BoundedPathCache", "make_cache"]
