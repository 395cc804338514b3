# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Readers for the tab-separated campus data files.

``campus_buildings.tsv`` has the header ``shortName longName x y`` and
``campus_paths.tsv`` the header ``x1 y1 x2 y2 distance``. Each path row is
one direction of travel.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, List, Sequence, TypeVar

from pathfinder.errors import ParserError

from .records import CampusBuilding, CampusPath

T = TypeVar("T")

BUILDING_COLUMNS = ("shortName", "longName", "x", "y")
PATH_COLUMNS = ("x1", "y1", "x2", "y2", "distance")

log = logging.getLogger(__name__)


def _number(row: Dict[str, str], column: str, file: Path, line: int) -> float:
    try:
        return float(row[column])
    except (TypeError, ValueError) as exc:
        raise ParserError(f"{file}:{line}: column {column!r} is not a number") from exc


def _read_tsv(
    path: str | Path,
    columns: Sequence[str],
    build: Callable[[Dict[str, str], Path, int], T],
) -> List[T]:
    file = Path(path)
    if not file.exists():
        raise ParserError(f"data file not found: {file}")
    records: List[T] = []
    with open(file, "r", encoding="utf-8", newline="") as fh:
        reader = csv.DictReader(fh, delimiter="\t")
        missing = [c for c in columns if c not in (reader.fieldnames or [])]
        if missing:
            raise ParserError(f"{file}: missing columns {', '.join(missing)}")
        for row in reader:
            # header is line 1
            line = reader.line_num
            if not any(isinstance(v, str) and v.strip() for v in row.values()):
                continue
            records.append(build(row, file, line))
    log.debug("parsed %d records from %s", len(records), file)
    return records


def _building(row: Dict[str, str], file: Path, line: int) -> CampusBuilding:
    short_name = (row["shortName"] or "").strip()
    if not short_name:
        raise ParserError(f"{file}:{line}: empty shortName")
    return CampusBuilding(
        short_name=short_name,
        long_name=(row["longName"] or "").strip(),
        x=_number(row, "x", file, line),
        y=_number(row, "y", file, line),
    )


def _path(row: Dict[str, str], file: Path, line: int) -> CampusPath:
    return CampusPath(*(_number(row, c, file, line) for c in PATH_COLUMNS))


def parse_campus_buildings(path: str | Path) -> List[CampusBuilding]:
    """Return the building records stored in ``path``.

    Raises
    ------
    ParserError
        If the file is missing, lacks a column or holds a non-numeric
        coordinate.
    """

    return _read_tsv(path, BUILDING_COLUMNS, _building)


def parse_campus_paths(path: str | Path) -> List[CampusPath]:
    """Return the path records stored in ``path``."""

    return _read_tsv(path, PATH_COLUMNS, _path)


__all__ = ["parse_campus_buildings", "parse_campus_paths", "BUILDING_COLUMNS", "PATH_COLUMNS"]
