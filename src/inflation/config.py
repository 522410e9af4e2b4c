# src/inflation/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_ALLOWED_FORMATS = {"json", "yaml"}
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_str(v: Optional[str], default: str) -> str:
    if v is None:
        return str(default)
    s = str(v).strip()
    return s if s else str(default)


@dataclass(frozen=True)
class InflationConfig:
    # Genesis file used by `validate` when no path is given.
    genesis_path: Optional[str]
    log_level: str
    output_format: str  # "json" | "yaml"


def default_config() -> InflationConfig:
    return InflationConfig(genesis_path=None, log_level="INFO", output_format="json")


def validate_config(cfg: InflationConfig) -> None:
    """Fail-fast validation for operator config."""
    if cfg.genesis_path is not None and (not isinstance(cfg.genesis_path, str) or not cfg.genesis_path.strip()):
        raise ValueError("genesis_path must be a non-empty string when set")

    if str(cfg.log_level or "").strip().upper() not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}; got: {cfg.log_level!r}")

    if str(cfg.output_format or "").strip().lower() not in _ALLOWED_FORMATS:
        raise ValueError(f"output_format must be one of {sorted(_ALLOWED_FORMATS)}; got: {cfg.output_format!r}")


def load_config() -> InflationConfig:
    d = default_config()
    raw_path = os.environ.get("INFLATION_GENESIS_PATH")
    cfg = InflationConfig(
        genesis_path=raw_path.strip() if raw_path and raw_path.strip() else d.genesis_path,
        log_level=_as_str(os.environ.get("INFLATION_LOG_LEVEL"), d.log_level).upper(),
        output_format=_as_str(os.environ.get("INFLATION_OUTPUT_FORMAT"), d.output_format).lower(),
    )
    validate_config(cfg)
    return cfg
