# src/inflation/params/loader.py
from __future__ import annotations

import logging
from pathlib import Path

from inflation.params.codec import genesis_from_json, genesis_from_yaml
from inflation.params.errors import ParamsDecodeError, ParamValidationError
from inflation.params.genesis import GenesisState, validate_genesis
from inflation.structured_logging import log_event

_LOG = logging.getLogger("inflation.genesis")

_YAML_SUFFIXES = {".yaml", ".yml"}


def read_genesis_file(path: str) -> GenesisState:
    """Decode a genesis file without validating it.

    Supported input shapes (JSON, or YAML for .yaml/.yml):
      { "params": { "mint_denom": "...", "exponential_calculation": {...},
                    "inflation_distribution": {...} },
        "period": 0, "epoch_identifier": "day", "epochs_per_period": 365,
        "skipped_epochs": 0 }
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(str(p))

    try:
        raw = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParamsDecodeError("genesis file is not valid UTF-8", {"path": str(p), "error": str(e)}) from e
    if p.suffix.lower() in _YAML_SUFFIXES:
        return genesis_from_yaml(raw)
    return genesis_from_json(raw)


def load_genesis(path: str) -> GenesisState:
    """Read and validate a genesis file; any failure rejects the whole file."""
    try:
        gs = read_genesis_file(path)
        validate_genesis(gs)
    except ParamValidationError as e:
        log_event(
            _LOG,
            "inflation_genesis_rejected",
            level=logging.WARNING,
            path=str(path),
            code=e.code,
            reason=e.reason,
        )
        raise

    log_event(
        _LOG,
        "inflation_genesis_loaded",
        path=str(path),
        mint_denom=gs.params.mint_denom,
        epoch_identifier=gs.epoch_identifier,
        epochs_per_period=gs.epochs_per_period,
    )
    return gs
