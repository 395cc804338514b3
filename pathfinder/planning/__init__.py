# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Shortest-path search over labeled graphs."""

from .shortest_path import ShortestPathFinder, shortest_path

__all__ = ["ShortestPathFinder", "shortest_path"]
