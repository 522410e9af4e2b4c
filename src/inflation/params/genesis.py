# src/inflation/params/genesis.py
from __future__ import annotations

from dataclasses import dataclass

from inflation.params.errors import InvalidGenesis
from inflation.params.params import Params, default_params

DEFAULT_EPOCH_IDENTIFIER: str = "day"
DEFAULT_EPOCHS_PER_PERIOD: int = 365


@dataclass(frozen=True, slots=True)
class GenesisState:
    params: Params
    period: int = 0
    epoch_identifier: str = DEFAULT_EPOCH_IDENTIFIER
    epochs_per_period: int = DEFAULT_EPOCHS_PER_PERIOD
    skipped_epochs: int = 0


def default_genesis_state() -> GenesisState:
    return GenesisState(params=default_params())


def _require_int(name: str, v: object) -> int:
    # bool is an int subclass; disallow it explicitly
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidGenesis(name, f"{name} must be an integer; got {type(v).__name__}")
    return v


def validate_genesis(gs: GenesisState) -> None:
    """Whole-value validation used at genesis import.

    All-or-nothing: the first failure is raised and nothing is accepted.
    """
    gs.params.validate()

    if not isinstance(gs.epoch_identifier, str) or not gs.epoch_identifier.strip():
        raise InvalidGenesis("epoch_identifier", "epoch identifier cannot be blank")

    if _require_int("epochs_per_period", gs.epochs_per_period) <= 0:
        raise InvalidGenesis(
            "epochs_per_period", f"epochs per period must be positive; got: {gs.epochs_per_period}"
        )

    if _require_int("period", gs.period) < 0:
        raise InvalidGenesis("period", f"period cannot be negative; got: {gs.period}")

    if _require_int("skipped_epochs", gs.skipped_epochs) < 0:
        raise InvalidGenesis("skipped_epochs", f"skipped epochs cannot be negative; got: {gs.skipped_epochs}")
