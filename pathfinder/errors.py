# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Exception types raised by the route finding core.

``InvalidArgumentError`` and ``ParserError`` derive from :class:`ValueError`
and ``NotFoundError`` from :class:`KeyError`, so callers that only know the
builtin hierarchy keep working. A missing route is not an error; queries
return ``None`` for it.
"""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for all pathfinder failures."""


class InvalidArgumentError(PathfinderError, ValueError):
    """Unknown or empty name, missing graph node, or invalid edge cost."""


class NotFoundError(PathfinderError, KeyError):
    """Lookup of a building short name that is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class ParserError(PathfinderError, ValueError):
    """Malformed or unreadable campus data file."""


__all__ = ["PathfinderError", "InvalidArgumentError", "NotFoundError", "ParserError"]
