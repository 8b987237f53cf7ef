# algoviz/core/config.py
#!/usr/bin/env python3
"""
Runtime settings.

Resolution order, lowest to highest:
- dataclass defaults
- ALGOVIZ_<KEY> environment variables (e.g. ALGOVIZ_SPEED=2)
- --key=value command-line arguments (e.g. --algorithm=astar --diagonal=on)
"""

import os
import sys
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional, Sequence

from algoviz.core.errors import ConfigError
from algoviz.core.registry import Algorithm, parse_algorithm

ENV_PREFIX = "ALGOVIZ_"

MIN_ARRAY_SIZE = 10
MAX_ARRAY_SIZE = 100
MIN_SPEED = 0.25
MAX_SPEED = 5.0
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    algorithm: Algorithm = Algorithm.BUBBLE
    array_size: int = 50
    min_value: int = 10
    max_value: int = 400
    grid_width: int = 1029
    grid_height: int = 567
    cell_size: int = 21
    speed: float = 1.0
    diagonal: bool = False
    maze_steps_per_frame: int = 10
    fps: int = 60
    seed: Optional[int] = None
    log_level: str = "INFO"

    @property
    def grid_rows(self) -> int:
        return self.grid_height // self.cell_size

    @property
    def grid_cols(self) -> int:
        return self.grid_width // self.cell_size


def _to_bool(key: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{key}: expected a boolean, got {raw!r}")


def _to_int(key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key}: expected an integer, got {raw!r}") from None


def _to_float(key: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key}: expected a number, got {raw!r}") from None


def _convert(key: str, raw: str):
    if key == "algorithm":
        return parse_algorithm(raw)
    if key == "diagonal":
        return _to_bool(key, raw)
    if key == "speed":
        return _to_float(key, raw)
    if key == "seed":
        return None if raw.strip().lower() in ("", "none") else _to_int(key, raw)
    if key == "log_level":
        return raw.strip().upper()
    return _to_int(key, raw)


def validate(s: Settings) -> Settings:
    if not MIN_ARRAY_SIZE <= s.array_size <= MAX_ARRAY_SIZE:
        raise ConfigError(f"array_size must be in [{MIN_ARRAY_SIZE}, {MAX_ARRAY_SIZE}], got {s.array_size}")
    if s.min_value < 1 or s.min_value > s.max_value:
        raise ConfigError(f"value range [{s.min_value}, {s.max_value}] is empty or non-positive")
    if not MIN_SPEED <= s.speed <= MAX_SPEED:
        raise ConfigError(f"speed must be in [{MIN_SPEED}, {MAX_SPEED}], got {s.speed}")
    if s.cell_size <= 0 or s.grid_rows <= 0 or s.grid_cols <= 0:
        raise ConfigError(f"grid {s.grid_width}x{s.grid_height} at cell size {s.cell_size} has no cells")
    if s.fps <= 0 or s.maze_steps_per_frame <= 0:
        raise ConfigError("fps and maze_steps_per_frame must be positive")
    if s.log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {s.log_level!r}")
    return s


def load_settings(argv: Optional[Sequence[str]] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(Settings)}

    raw = {}
    for key in known:
        env_key = ENV_PREFIX + key.upper()
        if env_key in environ:
            raw[key] = environ[env_key]

    for arg in argv:
        if not arg.startswith("--"):
            continue
        if "=" in arg:
            key, value = arg[2:].split("=", 1)
        else:
            key, value = arg[2:], "true"
        key = key.replace("-", "_").lower()
        if key not in known:
            raise ConfigError(f"unknown option --{key}")
        raw[key] = value

    overrides = {key: _convert(key, value) for key, value in raw.items()}
    return validate(replace(Settings(), **overrides))
