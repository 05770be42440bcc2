"""Simple configuration loader for gridpath."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class LoggingConfig:
    """Log level settings applied by the command line runner."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class PathsConfig:
    """Filesystem locations used when no explicit input file is given."""

    inputs: Path = Path("inputs")

    def input_file(self, year: int, day: int) -> Path:
        """Return the default input path for ``year``/``day``."""

        return self.inputs / str(year) / f"{day}.txt"


@dataclass
class Config:
    """Top level configuration dataclass."""

    logging: LoggingConfig
    paths: PathsConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    paths_data = data.get("paths") or {}
    paths = PathsConfig(inputs=Path(paths_data.get("inputs", "inputs")))

    return Config(logging=logging_cfg, paths=paths)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "PathsConfig",
    "load_config",
]
