# src/inflation/params/dec.py
from __future__ import annotations

"""Exact fixed-point decimal.

Every numeric parameter is stored as an integer scaled by 10**18, the same
precision the chain uses for its on-chain decimals:

    Dec.from_str("0.5")  ->  _i = 500_000_000_000_000_000

Binary floats are rejected everywhere: the distribution invariant needs exact
equality and every node must agree bit for bit.
"""

import re
from functools import total_ordering
from typing import Any, Union

PRECISION: int = 18
SCALE: int = 10**PRECISION

_DEC_RE = re.compile(r"^(-)?(\d+)(?:\.(\d+))?$", re.ASCII)

IntLike = Union[int, "Dec"]


@total_ordering
class Dec:
    __slots__ = ("_i",)

    def __init__(self, scaled: int) -> None:
        # bool is an int subclass; disallow it explicitly
        if isinstance(scaled, bool) or not isinstance(scaled, int):
            raise TypeError(f"Dec requires an int scaled by 10**{PRECISION}, got {type(scaled).__name__}")
        object.__setattr__(self, "_i", scaled)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Dec is immutable")

    # ---- constructors ----

    @classmethod
    def from_int(cls, n: int) -> "Dec":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Dec.from_int requires int, got {type(n).__name__}")
        return cls(n * SCALE)

    @classmethod
    def with_prec(cls, n: int, prec: int) -> "Dec":
        """Return n * 10**-prec, e.g. with_prec(5, 1) == 0.5."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Dec.with_prec requires int, got {type(n).__name__}")
        if isinstance(prec, bool) or not isinstance(prec, int):
            raise TypeError(f"Dec.with_prec precision must be int, got {type(prec).__name__}")
        if not 0 <= prec <= PRECISION:
            raise ValueError(f"precision must be 0..{PRECISION}; got: {prec}")
        return cls(n * 10 ** (PRECISION - prec))

    @classmethod
    def from_str(cls, s: str) -> "Dec":
        if not isinstance(s, str):
            raise TypeError(f"Dec.from_str requires str, got {type(s).__name__}")
        m = _DEC_RE.match(s.strip())
        if m is None:
            raise ValueError(f"invalid decimal string: {s!r}")
        sign, whole, frac = m.group(1), m.group(2), m.group(3) or ""
        if len(frac) > PRECISION:
            raise ValueError(f"too many decimal places in {s!r}; max {PRECISION}")
        scaled = int(whole) * SCALE + int(frac.ljust(PRECISION, "0"))
        return cls(-scaled if sign else scaled)

    @classmethod
    def zero(cls) -> "Dec":
        return cls(0)

    @classmethod
    def one(cls) -> "Dec":
        return cls(SCALE)

    # ---- predicates ----

    @property
    def scaled(self) -> int:
        return self._i

    def is_negative(self) -> bool:
        return self._i < 0

    def is_positive(self) -> bool:
        return self._i > 0

    def is_zero(self) -> bool:
        return self._i == 0

    # ---- arithmetic ----

    def neg(self) -> "Dec":
        return Dec(-self._i)

    def __neg__(self) -> "Dec":
        return self.neg()

    def __add__(self, other: IntLike) -> "Dec":
        return Dec(self._i + _coerce(other)._i)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> "Dec":
        return Dec(self._i - _coerce(other)._i)

    def __rsub__(self, other: IntLike) -> "Dec":
        return Dec(_coerce(other)._i - self._i)

    # ---- comparison ----

    def __eq__(self, other: object) -> bool:
        if isinstance(other, float):
            raise TypeError("cannot compare Dec with float")
        if isinstance(other, Dec):
            return self._i == other._i
        if isinstance(other, int) and not isinstance(other, bool):
            return self._i == other * SCALE
        return NotImplemented

    def __lt__(self, other: IntLike) -> bool:
        return self._i < _coerce(other)._i

    def __hash__(self) -> int:
        # integral values hash like the int they compare equal to
        whole, frac = divmod(self._i, SCALE)
        return hash(whole) if frac == 0 else hash(("Dec", self._i))

    # ---- rendering ----

    def __str__(self) -> str:
        whole, frac = divmod(abs(self._i), SCALE)
        sign = "-" if self._i < 0 else ""
        return f"{sign}{whole}.{frac:0{PRECISION}d}"

    def __repr__(self) -> str:
        return f"Dec('{self}')"

    def __reduce__(self):
        return (Dec, (self._i,))


def _coerce(v: Any) -> Dec:
    if isinstance(v, Dec):
        return v
    if isinstance(v, float):
        raise TypeError("float operands are not allowed with Dec")
    if isinstance(v, int) and not isinstance(v, bool):
        return Dec.from_int(v)
    raise TypeError(f"unsupported operand type for Dec: {type(v).__name__}")
