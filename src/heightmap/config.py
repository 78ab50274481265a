# src/heightmap/config.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "heightmap.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HeightMapConfig:
    """Runtime knobs for parsing, logging and tracing."""

    start_marker: str = "S"
    end_marker: str = "E"
    log_level: str = "INFO"
    trace_max_records: int = 10_000
    verify: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeightMapConfig":
        """Convenience constructor from a plain dict (e.g. YAML)."""
        markers = _section(data, "markers")
        tracing = _section(data, "tracing")
        try:
            cfg = cls(
                start_marker=str(markers.get("start", "S")),
                end_marker=str(markers.get("end", "E")),
                log_level=str(data.get("log_level", "INFO")).upper(),
                trace_max_records=int(tracing.get("max_records", 10_000)),
                verify=bool(data.get("verify", False)),
            )
        except TypeError as exc:
            raise ValueError(f"Invalid config value: {exc}") from exc
        cfg.validate()
        return cfg

    def validate(self) -> None:
        """Minimal sanity checks."""
        for name in ("start_marker", "end_marker"):
            marker = getattr(self, name)
            if len(marker) != 1 or "a" <= marker <= "z":
                raise ValueError(f"{name} must be one non-lowercase character, got {marker!r}")
        if self.start_marker == self.end_marker:
            raise ValueError("start_marker and end_marker must differ")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")
        if self.trace_max_records <= 0:
            raise ValueError("tracing.max_records must be positive")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from path."""
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_config(path: Optional[Path | str] = None) -> HeightMapConfig:
    """
    Load HeightMapConfig from YAML.

    An explicit path must exist. Without one, config/heightmap.yaml is used
    if present, otherwise defaults.
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Missing config file: {path}")
        return HeightMapConfig.from_dict(_load_yaml(path))

    if DEFAULT_CONFIG_PATH.exists():
        return HeightMapConfig.from_dict(_load_yaml(DEFAULT_CONFIG_PATH))
    return HeightMapConfig()


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return a nested mapping from the config, {} when absent."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value
