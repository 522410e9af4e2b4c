from __future__ import annotations

import pickle

import pytest

from inflation.params.dec import SCALE, Dec


def test_constructors_agree() -> None:
    assert Dec.with_prec(5, 1) == Dec.from_str("0.5")
    assert Dec.from_int(300_000_000) == Dec.from_str("300000000")
    assert Dec.one() == Dec.from_str("1.000000000000000000")
    assert Dec.zero() == Dec.from_str("-0")
    assert Dec.with_prec(-5, 1) == Dec.from_str("-0.5")
    assert Dec.one().scaled == SCALE


def test_canonical_string() -> None:
    assert str(Dec.with_prec(5, 1)) == "0.500000000000000000"
    assert str(Dec.from_int(-9_375_000)) == "-9375000.000000000000000000"
    assert str(Dec.with_prec(-5, 1)) == "-0.500000000000000000"
    assert repr(Dec.one()) == "Dec('1.000000000000000000')"


def test_exact_addition_has_no_rounding() -> None:
    total = Dec.with_prec(533333, 6) + Dec.with_prec(333333, 6) + Dec.with_prec(133333, 6)
    assert total == Dec.with_prec(999999, 6)
    assert total != Dec.one()

    tenth = Dec.from_str("0.1")
    assert tenth + tenth + tenth == Dec.from_str("0.3")


def test_negation_and_predicates() -> None:
    assert Dec.one().neg() == -Dec.one()
    assert (-Dec.one()).is_negative()
    assert Dec.one().is_positive()
    assert Dec.zero().is_zero()
    assert not Dec.zero().is_negative()
    assert Dec.one() - Dec.one() == Dec.zero()


def test_ordering() -> None:
    assert Dec.from_int(5) > Dec.one()
    assert Dec.with_prec(5, 1) < Dec.one()
    assert Dec.one() <= Dec.one()
    assert Dec.one() >= Dec.zero()
    assert Dec.one() == 1
    assert Dec.from_int(2) > 1


def test_hash_is_consistent_with_equality() -> None:
    assert hash(Dec.from_int(7)) == hash(7)
    assert len({Dec.with_prec(5, 1), Dec.from_str("0.50")}) == 1


def test_float_is_rejected() -> None:
    with pytest.raises(TypeError):
        Dec(0.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Dec.from_int(1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Dec.one() + 0.5  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = Dec.one() == 1.0
    with pytest.raises(TypeError):
        _ = Dec.one() < 2.0  # type: ignore[operator]


def test_bad_strings_are_rejected() -> None:
    for s in ["", "abc", "1.", ".5", "1e5", "0.5.5", "0.1234567890123456789"]:
        with pytest.raises(ValueError):
            Dec.from_str(s)


def test_with_prec_bounds() -> None:
    assert Dec.with_prec(1, 18).scaled == 1
    with pytest.raises(ValueError):
        Dec.with_prec(1, 19)


def test_immutable_and_picklable() -> None:
    d = Dec.with_prec(5, 1)
    with pytest.raises(AttributeError):
        d._i = 0  # type: ignore[misc]
    assert pickle.loads(pickle.dumps(d)) == d


def test_with_prec_rejects_non_int_precision() -> None:
    with pytest.raises(TypeError):
        Dec.with_prec(5, 1.9)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Dec.with_prec(5, True)
    with pytest.raises(TypeError):
        Dec.with_prec(5, "1")  # type: ignore[arg-type]
