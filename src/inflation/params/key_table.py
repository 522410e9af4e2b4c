# src/inflation/params/key_table.py
from __future__ import annotations

"""Parameter key table handed to the param store at startup.

There is no global registry: param_key_table() builds an immutable table of
(key, validator) pairs and the caller passes it to whatever store persists the
params. Each key is validated on its own when a governance change touches
only that field.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from inflation.params.errors import UnknownParamKey
from inflation.params.params import ParamSetPair, Validator, default_params

DEFAULT_SUBSPACE: str = "inflation"


@dataclass(frozen=True)
class KeyTable:
    subspace: str
    pairs: Tuple[ParamSetPair, ...]

    def keys(self) -> Tuple[str, ...]:
        return tuple(p.key for p in self.pairs)

    def __contains__(self, key: object) -> bool:
        return any(p.key == key for p in self.pairs)

    def __iter__(self) -> Iterator[ParamSetPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def _pair(self, key: str) -> Optional[ParamSetPair]:
        for p in self.pairs:
            if p.key == key:
                return p
        return None

    def validator_for(self, key: str) -> Validator:
        p = self._pair(key)
        if p is None:
            raise UnknownParamKey(key)
        return p.validator

    def validate(self, key: str, value: Any) -> None:
        """Validate a single-key update; raises the field's own error."""
        self.validator_for(key)(value)

    def as_dict(self) -> Dict[str, Validator]:
        return {p.key: p.validator for p in self.pairs}


def param_key_table(subspace: str = DEFAULT_SUBSPACE) -> KeyTable:
    if not isinstance(subspace, str) or not subspace.strip():
        raise ValueError("subspace must be a non-empty string")
    # Only keys and validators matter here; the bound default values are unused.
    return KeyTable(subspace=subspace, pairs=default_params().param_set_pairs())
