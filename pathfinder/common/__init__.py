# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Shared helpers for the pathfinder modules."""

from .telemetry import QueryStats

__all__ = ["QueryStats"]
