from __future__ import annotations

import pytest

from inflation.params.denom import validate_denom
from inflation.params.errors import InvalidDenom, InvalidParamType


def test_valid_denoms() -> None:
    for d in ["aevmos", "uatom", "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2", "a1", "x:y.z_w-v"]:
        validate_denom(d)


def test_empty_denom_is_rejected() -> None:
    with pytest.raises(InvalidDenom) as ei:
        validate_denom("")
    assert ei.value.denom == ""
    assert ei.value.code == "invalid_denom"


def test_leading_slash_is_rejected() -> None:
    with pytest.raises(InvalidDenom):
        validate_denom("/aevmos")


def test_other_malformed_denoms() -> None:
    for d in ["a", "1abc", " aevmos", "aevmos ", "a$b", "a" * 129, "   "]:
        with pytest.raises(InvalidDenom):
            validate_denom(d)


def test_length_bounds() -> None:
    validate_denom("a" * 128)
    validate_denom("ab")


def test_non_string_is_a_type_error() -> None:
    with pytest.raises(InvalidParamType):
        validate_denom(42)
