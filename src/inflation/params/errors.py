# src/inflation/params/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ParamValidationError(ValueError):
    """Canonical error type for rejected inflation parameters.

    Every subclass is a configuration rejection: there is no retry path and a
    value that raised must never be accepted into chain state.
    """

    code: str
    reason: str
    details: Any | None = None

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.code}:{self.reason}"
        return f"{self.code}:{self.reason}:{self.details}"


class InvalidDenom(ParamValidationError):
    def __init__(self, denom: Any) -> None:
        super().__init__("invalid_denom", f"invalid denom: {denom!r}", {"denom": denom})
        self.denom = denom


class NegativeCoefficient(ParamValidationError):
    def __init__(self, name: str, value: Any = None) -> None:
        super().__init__(
            "negative_coefficient",
            f"{name} coefficient cannot be negative",
            {"coefficient": name, "value": str(value) if value is not None else None},
        )
        self.name = name


class RangeViolation(ParamValidationError):
    def __init__(self, name: str, low: Any, high: Any, value: Any = None) -> None:
        super().__init__(
            "range_violation",
            f"{name} must be in [{low}, {high}]",
            {"field": name, "range": [str(low), str(high)], "value": str(value) if value is not None else None},
        )
        self.name = name
        self.low = low
        self.high = high


class NegativeRatio(ParamValidationError):
    def __init__(self, name: str, value: Any = None) -> None:
        super().__init__(
            "negative_ratio",
            f"{name} distribution ratio must not be negative",
            {"ratio": name, "value": str(value) if value is not None else None},
        )
        self.name = name


class DistributionNotNormalized(ParamValidationError):
    def __init__(self, total: Any) -> None:
        super().__init__(
            "distribution_not_normalized",
            "total distributions ratio should be 1",
            {"total": str(total)},
        )
        self.total = total


class InvalidParamType(ParamValidationError):
    def __init__(self, name: str, expected: str, value: Any) -> None:
        super().__init__(
            "invalid_param_type",
            f"invalid parameter type for {name}: {type(value).__name__}",
            {"param": name, "expected": expected},
        )
        self.name = name


class UnknownParamKey(ParamValidationError):
    def __init__(self, key: str) -> None:
        super().__init__("unknown_param_key", f"unknown parameter key: {key!r}", {"key": key})
        self.key = key


class ParamsDecodeError(ParamValidationError):
    def __init__(self, reason: str, details: Any | None = None) -> None:
        super().__init__("decode_error", reason, details)


class InvalidGenesis(ParamValidationError):
    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__("invalid_genesis", reason, {"field": field_name})
        self.field = field_name
