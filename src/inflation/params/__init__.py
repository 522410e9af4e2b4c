# src/inflation/params/__init__.py
"""
Inflation parameters: data model and validation.

  - dec: exact fixed-point decimal (10**18 scale)
  - denom: mint denomination format check
  - params: ExponentialCalculation, InflationDistribution, Params
  - key_table: immutable (key, validator) table for the param store
  - genesis: GenesisState + whole-value genesis validation
  - codec: deterministic JSON/YAML representation (pydantic shape checks)
  - loader: genesis file reading with structured logging
"""

from __future__ import annotations

from inflation.params.dec import Dec
from inflation.params.denom import validate_denom
from inflation.params.errors import (
    DistributionNotNormalized,
    InvalidDenom,
    InvalidGenesis,
    InvalidParamType,
    NegativeCoefficient,
    NegativeRatio,
    ParamsDecodeError,
    ParamValidationError,
    RangeViolation,
    UnknownParamKey,
)
from inflation.params.genesis import GenesisState, default_genesis_state, validate_genesis
from inflation.params.key_table import KeyTable, param_key_table
from inflation.params.params import (
    PARAM_STORE_KEY_EXPONENTIAL_CALCULATION,
    PARAM_STORE_KEY_INFLATION_DISTRIBUTION,
    PARAM_STORE_KEY_MINT_DENOM,
    ExponentialCalculation,
    InflationDistribution,
    Params,
    ParamSetPair,
    default_params,
    new_params,
)

__all__ = [
    "Dec",
    "validate_denom",
    "ParamValidationError",
    "InvalidDenom",
    "NegativeCoefficient",
    "RangeViolation",
    "NegativeRatio",
    "DistributionNotNormalized",
    "InvalidParamType",
    "UnknownParamKey",
    "ParamsDecodeError",
    "InvalidGenesis",
    "ExponentialCalculation",
    "InflationDistribution",
    "Params",
    "ParamSetPair",
    "new_params",
    "default_params",
    "PARAM_STORE_KEY_MINT_DENOM",
    "PARAM_STORE_KEY_EXPONENTIAL_CALCULATION",
    "PARAM_STORE_KEY_INFLATION_DISTRIBUTION",
    "KeyTable",
    "param_key_table",
    "GenesisState",
    "default_genesis_state",
    "validate_genesis",
]
