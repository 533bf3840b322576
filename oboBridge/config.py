from __future__ import annotations

"""Loader for codec configuration shared by the CLI and embedding callers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from oboBridge.ids.namespaces import OBO_BASE

CONFIG_ENV = "OBOBRIDGE_CONFIG"
ONTOLOGY_ID_ENV = "OBOBRIDGE_ONTOLOGY_ID"
DEFAULT_CONFIG_NAME = "obobridge.yml"


@dataclass(slots=True)
class LoggingConfig:
    """Settings for the structured JSON logger."""

    enabled: bool = True
    sample_rate: float = 1.0
    max_details_bytes: int = 4096


@dataclass(slots=True)
class BridgeConfig:
    """Current ontology, base stem and extra prefixes for the codec."""

    ontology_id: str | None = None
    base: str = OBO_BASE
    prefixes: dict[str, str] = field(default_factory=dict)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path | None:
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env)
    local = Path(DEFAULT_CONFIG_NAME)
    if local.exists():
        return local
    return None


def _coerce_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _load_logging(data: Mapping[str, Any] | None) -> LoggingConfig:
    if not data:
        return LoggingConfig()
    return LoggingConfig(
        enabled=bool(data.get("enabled", True)),
        sample_rate=max(0.0, min(1.0, _coerce_float(data.get("sample_rate"), 1.0))),
        max_details_bytes=max(0, _coerce_int(data.get("max_details_bytes"), 4096)),
    )


def _load_prefixes(data: Any, path: Path) -> dict[str, str]:
    if not data:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"'prefixes' must be a mapping in {path}")
    return {str(k).strip(): str(v).strip() for k, v in data.items()}


def load_config(path: Path | None = None) -> BridgeConfig:
    """Load settings from YAML with safe defaults.

    ``OBOBRIDGE_ONTOLOGY_ID`` overrides the file's ``ontology_id``.
    """

    if path is None:
        path = config_path()
    raw: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise ValueError(f"Config file not found: {path}")
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError:
            raise ValueError(f"Invalid YAML in config: {path}") from None
        if not isinstance(raw, Mapping):
            raise ValueError(f"Config root must be a mapping: {path}")

    ontology_id = os.getenv(ONTOLOGY_ID_ENV) or raw.get("ontology_id")
    base = str(raw.get("base") or OBO_BASE).strip()
    return BridgeConfig(
        ontology_id=str(ontology_id).strip() if ontology_id else None,
        base=base,
        prefixes=_load_prefixes(raw.get("prefixes"), path or Path(DEFAULT_CONFIG_NAME)),
        logging=_load_logging(raw.get("logging")),
    )


__all__ = [
    "CONFIG_ENV",
    "ONTOLOGY_ID_ENV",
    "LoggingConfig",
    "BridgeConfig",
    "config_path",
    "load_config",
]
