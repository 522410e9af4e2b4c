# src/inflation/params/params.py
from __future__ import annotations

"""Inflation module parameters.

    inflation(x) = (A * (1 - R) ** x) + C    (scaled by the bonding exponent B)

Construction and validation are separate steps: new_params() never validates,
callers must invoke Params.validate() before accepting a value. Params values
are frozen; a parameter change always produces a new Params.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Tuple

from inflation.params.dec import Dec
from inflation.params.denom import validate_denom
from inflation.params.errors import (
    DistributionNotNormalized,
    InvalidParamType,
    NegativeCoefficient,
    NegativeRatio,
    RangeViolation,
    UnknownParamKey,
)

DEFAULT_INFLATION_DENOM: str = "aevmos"

# Param store keys
PARAM_STORE_KEY_MINT_DENOM: str = "ParamStoreKeyMintDenom"
PARAM_STORE_KEY_EXPONENTIAL_CALCULATION: str = "ParamStoreKeyExponentialCalculation"
PARAM_STORE_KEY_INFLATION_DISTRIBUTION: str = "ParamStoreKeyInflationDistribution"

Validator = Callable[[Any], None]


def _require_dec(name: str, v: Any) -> Dec:
    if not isinstance(v, Dec):
        raise InvalidParamType(name, "Dec", v)
    return v


@dataclass(frozen=True)
class ExponentialCalculation:
    a: Dec  # initial emission magnitude
    r: Dec  # per-period decay rate
    c: Dec  # long-run floor emission
    b: Dec  # bonding ratio exponent

    def validate(self) -> None:
        # Order is fixed so the reported error is deterministic.
        # Each field is type-checked right before its own bound check.
        a = _require_dec("A", self.a)
        if a.is_negative():
            raise NegativeCoefficient("A", a)

        r = _require_dec("R", self.r)
        if r.is_negative() or r > Dec.one():
            raise RangeViolation("R", Dec.zero(), Dec.one(), r)

        c = _require_dec("C", self.c)
        if c.is_negative():
            raise NegativeCoefficient("C", c)

        b = _require_dec("B", self.b)
        if b.is_negative():
            raise NegativeCoefficient("B", b)


@dataclass(frozen=True)
class InflationDistribution:
    staking_rewards: Dec
    usage_incentives: Dec
    community_pool: Dec

    def total(self) -> Dec:
        return self.staking_rewards + self.usage_incentives + self.community_pool

    def validate(self) -> None:
        for name, v in (
            ("StakingRewards", self.staking_rewards),
            ("UsageIncentives", self.usage_incentives),
            ("CommunityPool", self.community_pool),
        ):
            if _require_dec(name, v).is_negative():
                raise NegativeRatio(name, v)

        total = self.total()
        if total != Dec.one():
            raise DistributionNotNormalized(total)


def validate_exponential_calculation(value: Any) -> None:
    if not isinstance(value, ExponentialCalculation):
        raise InvalidParamType("ExponentialCalculation", "ExponentialCalculation", value)
    value.validate()


def validate_inflation_distribution(value: Any) -> None:
    if not isinstance(value, InflationDistribution):
        raise InvalidParamType("InflationDistribution", "InflationDistribution", value)
    value.validate()


@dataclass(frozen=True)
class ParamSetPair:
    """One independently settable parameter: store key, Params attribute, validator."""

    key: str
    attr: str
    value: Any
    validator: Validator


@dataclass(frozen=True)
class Params:
    mint_denom: str
    exponential_calculation: ExponentialCalculation
    inflation_distribution: InflationDistribution

    def validate(self) -> None:
        """Fail-fast validation: the first failing check is raised unchanged."""
        validate_denom(self.mint_denom)
        validate_exponential_calculation(self.exponential_calculation)
        validate_inflation_distribution(self.inflation_distribution)

    def param_set_pairs(self) -> Tuple[ParamSetPair, ...]:
        return (
            ParamSetPair(PARAM_STORE_KEY_MINT_DENOM, "mint_denom", self.mint_denom, validate_denom),
            ParamSetPair(
                PARAM_STORE_KEY_EXPONENTIAL_CALCULATION,
                "exponential_calculation",
                self.exponential_calculation,
                validate_exponential_calculation,
            ),
            ParamSetPair(
                PARAM_STORE_KEY_INFLATION_DISTRIBUTION,
                "inflation_distribution",
                self.inflation_distribution,
                validate_inflation_distribution,
            ),
        )

    def with_param(self, key: str, value: Any) -> "Params":
        """Return a copy with one field replaced.

        Only the changed field is re-validated; use validate() for whole-value
        checks at genesis.
        """
        for pair in self.param_set_pairs():
            if pair.key == key:
                pair.validator(value)
                return replace(self, **{pair.attr: value})
        raise UnknownParamKey(key)


def new_params(
    mint_denom: str,
    exponential_calculation: ExponentialCalculation,
    inflation_distribution: InflationDistribution,
) -> Params:
    return Params(
        mint_denom=mint_denom,
        exponential_calculation=exponential_calculation,
        inflation_distribution=inflation_distribution,
    )


def default_params() -> Params:
    """Production defaults."""
    return Params(
        mint_denom=DEFAULT_INFLATION_DENOM,
        exponential_calculation=ExponentialCalculation(
            a=Dec.from_int(300_000_000),
            r=Dec.with_prec(50, 2),  # 50%
            c=Dec.from_int(9_375_000),
            b=Dec.one(),
        ),
        inflation_distribution=InflationDistribution(
            staking_rewards=Dec.with_prec(533333334, 9),  # 0.53 = 40% / (1 - 25%)
            usage_incentives=Dec.with_prec(333333333, 9),  # 0.33 = 25% / (1 - 25%)
            community_pool=Dec.with_prec(133333333, 9),  # 0.13 = 10% / (1 - 25%)
        ),
    )
