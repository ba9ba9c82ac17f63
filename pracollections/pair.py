"""An immutable pair of integers that adds component-wise."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """Two integer components."""

    a: int
    b: int

    def __add__(self, other: object) -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.a + other.a, self.b + other.b)