"""Random 64-bit identifiers for entities."""

from __future__ import annotations

import random

_MAX = 2**64
_random = random.Random()


class UUID(int):
    """A 64-bit unsigned identifier; random unless a value is given."""

    def __new__(cls, value: int | None = None) -> "UUID":
        if value is None:
            value = _random.getrandbits(64)
        value = int(value)
        if not 0 <= value < _MAX:
            raise ValueError(f"UUID must fit in 64 unsigned bits, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"UUID({int(self)})"