"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from antichess.core.types import normalize_square


@dataclass(frozen=True, slots=True)
class Move:
    """A (from, to) pair of lowercase square names. Transient, never stored."""

    from_sq: str
    to_sq: str

    @classmethod
    def parse(cls, from_sq: str, to_sq: str) -> Move:
        """Build a move from user-supplied names, normalising their case."""
        return cls(normalize_square(from_sq), normalize_square(to_sq))

    def __str__(self) -> str:
        return f"{self.from_sq} {self.to_sq}"
