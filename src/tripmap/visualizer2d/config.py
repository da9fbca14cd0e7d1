# config.py
from dataclasses import dataclass, fields
from pathlib import Path
import json

from tripmap.model.accumulator import MODES
from tripmap.model.models import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    file: str = ""
    mode: str = "plot"
    limit: int = 0
    width: int = 600
    height: int = 400
    overlay_map: bool = True
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    out_dir: str = "images"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.mode not in MODES:
            raise ConfigError(f"mode must be one of {'|'.join(MODES)}, got {self.mode!r}")
        if self.limit < 0:
            raise ConfigError(f"limit must be >= 0, got {self.limit}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"invalid image size {self.width}x{self.height}")
        if self.zoom is not None and not 0 <= self.zoom <= 22:
            raise ConfigError(f"zoom out of range: {self.zoom}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_dict(cls, d: dict) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
        try:
            return cls(**d)
        except TypeError as e:
            raise ConfigError(str(e)) from e


def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")
    return data
