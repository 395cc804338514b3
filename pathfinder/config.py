# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Configuration schema and loading.

Settings come from three layers merged with OmegaConf, later layers winning:

1. the structured defaults of :class:`PathfinderConfig`;
2. a YAML file, ``configs/pathfinder.yaml`` unless ``path`` or the
   ``PATHFINDER_CONFIG`` environment variable names another one;
3. dotlist overrides such as ``cache.max_entries=128``.

Unknown keys are rejected by the schema.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from omegaconf import DictConfig, OmegaConf

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = PROJECT_ROOT / "configs" / "pathfinder.yaml"


@dataclass
class DataConfig:
    buildings: str = "data/campus_buildings.tsv"
    paths: str = "data/campus_paths.tsv"


@dataclass
class CacheConfig:
    # 0 = unbounded
    max_entries: int = 0


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class PathfinderConfig:
    data: DataConfig = field(default_factory=DataConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # INCREASING_DOWN_RIGHT or INCREASING_UP_RIGHT
    coordinates: str = "INCREASING_DOWN_RIGHT"


def load_config(
    path: Optional[str | Path] = None, overrides: Sequence[str] = ()
) -> DictConfig:
    """Return the merged configuration.

    Parameters
    ----------
    path:
        YAML file to merge over the defaults. ``None`` selects
        ``$PATHFINDER_CONFIG`` or the bundled ``configs/pathfinder.yaml`` when
        present.
    overrides:
        OmegaConf dotlist entries applied last.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested file does not exist.
    """

    cfg = OmegaConf.structured(PathfinderConfig)
    if path is None:
        env = os.environ.get("PATHFINDER_CONFIG")
        if env:
            path = env
        elif DEFAULT_CONFIG.exists():
            path = DEFAULT_CONFIG
    if path is not None:
        file = Path(path)
        if not file.exists():
            raise FileNotFoundError(f"config file not found: {file}")
        cfg = OmegaConf.merge(cfg, OmegaConf.load(file))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return cfg  # type: ignore[return-value]


def resolve_data_path(value: str | Path) -> Path:
    """Resolve ``value`` against the working directory, then the project root."""

    p = Path(value).expanduser()
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_ROOT / p
    return candidate if candidate.exists() else p


__all__ = [
    "CacheConfig",
    "DataConfig",
    "LoggingConfig",
    "PathfinderConfig",
    "load_config",
    "resolve_data_path",
]
