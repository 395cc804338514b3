# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Test utilities for pathfinder."""

from .script_driver import CommandError, PathfinderTestDriver, run_script

__all__ = ["CommandError", "PathfinderTestDriver", "run_script"]
