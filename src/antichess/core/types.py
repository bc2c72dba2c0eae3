"""Square notation helpers.

Squares cross the API boundary as two-character names ("e4"). Internally
the board is addressed by ``(row, col)`` pairs::

    row 0 = rank 1, ..., row 7 = rank 8
    col 0 = file a, ..., col 7 = file h
"""

from __future__ import annotations

from typing import TypeAlias

Coords: TypeAlias = tuple[int, int]  # (row, col), both 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_square(name: object) -> bool:
    """Whether *name* is a square name; the file letter is case-insensitive."""
    if not isinstance(name, str) or len(name) != 2:
        return False
    return name[0].lower() in FILES and name[1] in RANKS


def normalize_square(name: str) -> str:
    """Canonical (lowercase) spelling of a square name, e.g. 'E4' → 'e4'."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return name.lower()


def square_to_coords(name: str) -> Coords:
    """Parse square name, e.g. 'e4' → (3, 4)."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return RANKS.index(name[1]), FILES.index(name[0].lower())


def coords_to_square(row: int, col: int) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    if not is_valid_coords(row, col):
        raise ValueError(f"Invalid coordinates: {(row, col)!r}")
    return FILES[col] + RANKS[row]


def is_valid_coords(row: int, col: int) -> bool:
    """Check whether the pair addresses a cell of the 8×8 board."""
    return 0 <= row < 8 and 0 <= col < 8


# Row-major scan order: a1, b1, ..., h1, a2, ..., h8.
ALL_COORDS: tuple[Coords, ...] = tuple((r, c) for r in range(8) for c in range(8))
ALL_SQUARES: tuple[str, ...] = tuple(coords_to_square(r, c) for r, c in ALL_COORDS)
