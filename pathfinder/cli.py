# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Command line interface.

Examples
--------
``pathfinder buildings``
    List every building as ``SHORT: Long name``.
``pathfinder route LIB ENG``
    Print walking directions from ``LIB`` to ``ENG``.
``pathfinder route LIB ENG --json``
    Print the route payload served to map clients.
``pathfinder script tests/scripts/basic.test``
    Run a graph script through :mod:`pathfinder.testing.script_driver`.

Invalid building names exit with status 2; an unreachable destination is a
normal answer.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from omegaconf import DictConfig

from pathfinder.campus.map import CampusMap
from pathfinder.campus.responses import buildings_response, path_response
from pathfinder.config import load_config
from pathfinder.errors import PathfinderError
from pathfinder.testing.script_driver import run_script
from pathfinder.text.directions import coordinate_properties, format_directions

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathfinder", description="Campus route finder")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--buildings", default=None, help="Override data.buildings")
    parser.add_argument("--paths", default=None, help="Override data.paths")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Config override in dotlist form, e.g. cache.max_entries=64",
    )
    parser.add_argument("--log-level", default=None, help="Override logging.level")
    sub = parser.add_subparsers(dest="command", required=True)

    b = sub.add_parser("buildings", help="List buildings")
    b.add_argument("--json", action="store_true", help="Print the JSON payload")

    r = sub.add_parser("route", help="Find the shortest route between two buildings")
    r.add_argument("start", help="Short name of the start building")
    r.add_argument("end", help="Short name of the destination building")
    r.add_argument("--json", action="store_true", help="Print the JSON payload")

    s = sub.add_parser("script", help="Run a graph test script")
    s.add_argument("file", type=Path, help="Script file; '-' reads stdin")
    return parser


def _overrides(args: argparse.Namespace) -> List[str]:
    overrides = list(args.overrides)
    if args.buildings:
        overrides.append(f"data.buildings={args.buildings}")
    if args.paths:
        overrides.append(f"data.paths={args.paths}")
    if args.log_level:
        overrides.append(f"logging.level={args.log_level}")
    return overrides


def _print_buildings(campus: CampusMap, as_json: bool) -> None:
    if as_json:
        print(json.dumps(buildings_response(campus), indent=2))
        return
    for short, long in campus.building_names().items():
        print(f"{short}: {long}")


def _print_route(campus: CampusMap, cfg: DictConfig, start: str, end: str, as_json: bool) -> None:
    props = coordinate_properties(cfg.coordinates)
    if as_json:
        print(json.dumps(path_response(campus, start, end, props), indent=2))
        return
    path = campus.find_shortest_path(start, end)
    if path is None:
        print(f"No path from {start} to {end}")
        return
    for line in format_directions(start, end, path, props):
        print(line)


def _run_script(file: Path) -> int:
    if str(file) == "-":
        run_script(sys.stdin, sys.stdout)
        return 0
    if not file.exists():
        print(f"error: script not found: {file}", file=sys.stderr)
        return 2
    with open(file, "r", encoding="utf-8") as fh:
        run_script(fh, sys.stdout)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""

    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(args.config, _overrides(args))
    logging.basicConfig(level=str(cfg.logging.level).upper(), format=cfg.logging.format)

    if args.command == "script":
        return _run_script(args.file)

    try:
        campus = CampusMap.from_config(cfg)
        if args.command == "buildings":
            _print_buildings(campus, args.json)
        else:
            _print_route(campus, cfg, args.start, args.end, args.json)
    except PathfinderError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2
    log.debug("query stats: %s", campus.log_status())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI
    sys.exit(main())
