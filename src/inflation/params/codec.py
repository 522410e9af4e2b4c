# src/inflation/params/codec.py
from __future__ import annotations

"""Wire/persisted representation of inflation params.

Shape checks only: decoding never runs Params.validate(), so the store can
round-trip any value it holds and the caller decides when to validate.

Decimals travel as strings with 18 fractional digits ("0.500000000000000000").
JSON numbers are rejected so no value ever passes through a binary float.
"""

import json
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inflation.params.dec import Dec
from inflation.params.errors import ParamsDecodeError
from inflation.params.genesis import GenesisState
from inflation.params.params import ExponentialCalculation, InflationDistribution, Params

Json = Dict[str, Any]


class _StrictModel(BaseModel):
    """Strict model: reject unknown keys."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def _dec_str(v: Any) -> str:
    if not isinstance(v, str):
        raise ValueError("decimal must be encoded as a string")
    Dec.from_str(v)
    return v


class ExponentialCalculationModel(_StrictModel):
    a: str
    r: str
    c: str
    b: str

    @field_validator("a", "r", "c", "b", mode="before")
    @classmethod
    def check_decimal(cls, v: Any) -> str:
        return _dec_str(v)

    def to_value(self) -> ExponentialCalculation:
        return ExponentialCalculation(
            a=Dec.from_str(self.a),
            r=Dec.from_str(self.r),
            c=Dec.from_str(self.c),
            b=Dec.from_str(self.b),
        )


class InflationDistributionModel(_StrictModel):
    staking_rewards: str
    usage_incentives: str
    community_pool: str

    @field_validator("staking_rewards", "usage_incentives", "community_pool", mode="before")
    @classmethod
    def check_decimal(cls, v: Any) -> str:
        return _dec_str(v)

    def to_value(self) -> InflationDistribution:
        return InflationDistribution(
            staking_rewards=Dec.from_str(self.staking_rewards),
            usage_incentives=Dec.from_str(self.usage_incentives),
            community_pool=Dec.from_str(self.community_pool),
        )


class ParamsModel(_StrictModel):
    mint_denom: str
    exponential_calculation: ExponentialCalculationModel
    inflation_distribution: InflationDistributionModel

    def to_value(self) -> Params:
        return Params(
            mint_denom=self.mint_denom,
            exponential_calculation=self.exponential_calculation.to_value(),
            inflation_distribution=self.inflation_distribution.to_value(),
        )


class GenesisStateModel(_StrictModel):
    params: ParamsModel
    period: int = Field(default=0, strict=True)
    epoch_identifier: str = Field(default="day", strict=True)
    epochs_per_period: int = Field(default=365, strict=True)
    skipped_epochs: int = Field(default=0, strict=True)

    def to_value(self) -> GenesisState:
        return GenesisState(
            params=self.params.to_value(),
            period=self.period,
            epoch_identifier=self.epoch_identifier,
            epochs_per_period=self.epochs_per_period,
            skipped_epochs=self.skipped_epochs,
        )


def _decode(model: type[_StrictModel], obj: Any, what: str) -> Any:
    if not isinstance(obj, dict):
        raise ParamsDecodeError(f"{what} must be a JSON object", {"got": type(obj).__name__})
    try:
        return model.model_validate(obj).to_value()
    except ValidationError as e:
        errs = [
            {"loc": ".".join(str(x) for x in err.get("loc", ())), "msg": str(err.get("msg", ""))}
            for err in e.errors()
        ]
        raise ParamsDecodeError(f"malformed {what}", errs) from e


# ---------------------------------------------------------------------------
# Params
# ---------------------------------------------------------------------------


def exponential_calculation_to_dict(ec: ExponentialCalculation) -> Json:
    return {"a": str(ec.a), "r": str(ec.r), "c": str(ec.c), "b": str(ec.b)}


def inflation_distribution_to_dict(d: InflationDistribution) -> Json:
    return {
        "staking_rewards": str(d.staking_rewards),
        "usage_incentives": str(d.usage_incentives),
        "community_pool": str(d.community_pool),
    }


def params_to_dict(p: Params) -> Json:
    return {
        "mint_denom": p.mint_denom,
        "exponential_calculation": exponential_calculation_to_dict(p.exponential_calculation),
        "inflation_distribution": inflation_distribution_to_dict(p.inflation_distribution),
    }


def params_from_dict(obj: Any) -> Params:
    return _decode(ParamsModel, obj, "params")


def exponential_calculation_from_dict(obj: Any) -> ExponentialCalculation:
    return _decode(ExponentialCalculationModel, obj, "exponential_calculation")


def inflation_distribution_from_dict(obj: Any) -> InflationDistribution:
    return _decode(InflationDistributionModel, obj, "inflation_distribution")


def exponential_calculation_from_json(raw: str | bytes) -> ExponentialCalculation:
    return exponential_calculation_from_dict(_loads(raw))


def inflation_distribution_from_json(raw: str | bytes) -> InflationDistribution:
    return inflation_distribution_from_dict(_loads(raw))


def _dumps(obj: Json) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _loads(raw: str | bytes) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParamsDecodeError("invalid JSON", {"error": str(e)}) from e


def params_to_json(p: Params) -> str:
    """Deterministic encoding: identical params always give identical bytes."""
    return _dumps(params_to_dict(p))


def params_from_json(raw: str | bytes) -> Params:
    return params_from_dict(_loads(raw))


def params_to_yaml(p: Params) -> str:
    return yaml.safe_dump(params_to_dict(p), sort_keys=False, default_flow_style=False)


# ---------------------------------------------------------------------------
# Genesis
# ---------------------------------------------------------------------------


def genesis_to_dict(gs: GenesisState) -> Json:
    return {
        "params": params_to_dict(gs.params),
        "period": int(gs.period),
        "epoch_identifier": gs.epoch_identifier,
        "epochs_per_period": int(gs.epochs_per_period),
        "skipped_epochs": int(gs.skipped_epochs),
    }


def genesis_from_dict(obj: Any) -> GenesisState:
    return _decode(GenesisStateModel, obj, "genesis")


def genesis_to_json(gs: GenesisState) -> str:
    return _dumps(genesis_to_dict(gs))


def genesis_from_json(raw: str | bytes) -> GenesisState:
    return genesis_from_dict(_loads(raw))


def genesis_to_yaml(gs: GenesisState) -> str:
    return yaml.safe_dump(genesis_to_dict(gs), sort_keys=False, default_flow_style=False)


def genesis_from_yaml(raw: str) -> GenesisState:
    try:
        obj = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ParamsDecodeError("invalid YAML", {"error": str(e)}) from e
    return genesis_from_dict(obj)
