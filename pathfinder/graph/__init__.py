# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Graph containers and path values."""

from .labeled_graph import LabeledEdge, LabeledGraph, sort_nodes
from .path import Path, Segment

__all__ = ["LabeledEdge", "LabeledGraph", "Path", "Segment", "sort_nodes"]
