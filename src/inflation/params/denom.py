# src/inflation/params/denom.py
from __future__ import annotations

import re
from typing import Any

from inflation.params.errors import InvalidDenom, InvalidParamType

# Letter first, then letters, digits and "/:._-"; 2..128 characters in total.
DENOM_PATTERN: str = r"[a-zA-Z][a-zA-Z0-9/:._-]{1,127}"

_DENOM_RE = re.compile(DENOM_PATTERN)


def validate_denom(denom: Any) -> None:
    """Raise InvalidDenom unless denom is a well-formed asset denomination."""
    if not isinstance(denom, str):
        raise InvalidParamType("MintDenom", "str", denom)
    if not denom.strip() or _DENOM_RE.fullmatch(denom) is None:
        raise InvalidDenom(denom)
