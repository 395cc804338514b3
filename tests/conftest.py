"""Pytest configuration for path setup and shared campus fixtures."""

import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))

from pathfinder.campus.map import CampusMap  # noqa: E402
from pathfinder.campus.records import CampusBuilding, CampusPath  # noqa: E402

SCRIPTS_DIR = Path(__file__).resolve().parent / "scripts"


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run tests marked as slow"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long running property tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(pytest.mark.skip(reason="need --runslow to run slow tests"))


def two_way(x1: float, y1: float, x2: float, y2: float, distance: float) -> List[CampusPath]:
    """Return path records for both directions of a segment."""

    return [CampusPath(x1, y1, x2, y2, distance), CampusPath(x2, y2, x1, y1, distance)]


@pytest.fixture
def campus_buildings() -> List[CampusBuilding]:
    return [
        CampusBuilding("LIB", "Central Library", 100, 100),
        CampusBuilding("SCI", "Science Hall", 400, 100),
        CampusBuilding("ENG", "Engineering Building", 400, 400),
        CampusBuilding("ART", "Arts Center", 100, 400),
        CampusBuilding("ADM", "Administration Building", 250, 250),
        CampusBuilding("OBS", "Observatory", 1000, 1000),
    ]


@pytest.fixture
def campus_paths() -> List[CampusPath]:
    paths: List[CampusPath] = []
    # LIB - junction - SCI along the top edge
    paths += two_way(100, 100, 250, 100, 150.0)
    paths += two_way(250, 100, 400, 100, 150.0)
    paths += two_way(100, 100, 100, 400, 300.0)
    paths += two_way(100, 400, 400, 400, 300.0)
    paths += two_way(400, 100, 400, 400, 300.0)
    paths += two_way(250, 250, 250, 100, 150.0)
    paths += two_way(250, 250, 400, 400, 212.132034)
    # one-way shortcut LIB -> ADM
    paths.append(CampusPath(100, 100, 250, 250, 212.132034))
    return paths


@pytest.fixture
def campus(campus_buildings, campus_paths) -> CampusMap:
    return CampusMap(campus_buildings, campus_paths)


@pytest.fixture
def campus_files(tmp_path, campus_buildings, campus_paths):
    """Write the fixture campus as TSV files and return their paths."""

    buildings = tmp_path / "campus_buildings.tsv"
    lines = ["shortName\tlongName\tx\ty"]
    lines += [f"{b.short_name}\t{b.long_name}\t{b.x}\t{b.y}" for b in campus_buildings]
    buildings.write_text("\n".join(lines) + "\n", encoding="utf-8")

    paths = tmp_path / "campus_paths.tsv"
    lines = ["x1\ty1\tx2\ty2\tdistance"]
    lines += [f"{p.x1}\t{p.y1}\t{p.x2}\t{p.y2}\t{p.distance}" for p in campus_paths]
    paths.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return buildings, paths
