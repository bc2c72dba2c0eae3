"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from antichess.core.enums import Color, PieceType
from antichess.core.piece import Piece
from antichess.core.types import Coords, square_to_coords

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _empty_grid() -> list[list[Piece | None]]:
    return [[None] * 8 for _ in range(8)]


class Board:
    """Mutable 8×8 grid of optional pieces, indexed by ``(row, col)``.

    A board belongs to exactly one game session. Nothing here checks
    legality: :meth:`apply_move` trusts that the rule engine already did.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = _empty_grid()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coords: Coords) -> Piece | None:
        row, col = coords
        return self._grid[row][col]

    def __setitem__(self, coords: Coords, piece: Piece | None) -> None:
        row, col = coords
        self._grid[row][col] = piece

    def piece_at(self, square: str) -> Piece | None:
        """Occupant of *square* (e.g. 'e4'), or None."""
        return self[square_to_coords(square)]

    def place(self, square: str, piece: Piece | None) -> None:
        """Put *piece* on *square*, replacing whatever was there."""
        self[square_to_coords(square)] = piece

    def is_empty(self, row: int, col: int) -> bool:
        return self._grid[row][col] is None

    # -- Geometry -----------------------------------------------------------

    def is_path_clear(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Are all cells strictly between the endpoints empty?

        The endpoints must share a row, a column or a diagonal. The
        destination's own occupant does not matter here.
        """
        row_step = (to_row > from_row) - (to_row < from_row)
        col_step = (to_col > from_col) - (to_col < from_col)

        row = from_row + row_step
        col = from_col + col_step
        while (row, col) != (to_row, to_col):
            if self._grid[row][col] is not None:
                return False
            row += row_step
            col += col_step
        return True

    # -- Queries ------------------------------------------------------------

    def count_pieces(self, color: Color) -> int:
        """Number of cells occupied by *color*."""
        return sum(
            1
            for rank in self._grid
            for piece in rank
            if piece is not None and piece.color == color
        )

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, from_sq: str, to_sq: str) -> None:
        """Relocate the occupant of *from_sq* to *to_sq*, discarding any capture."""
        from_row, from_col = square_to_coords(from_sq)
        to_row, to_col = square_to_coords(to_sq)
        self._grid[to_row][to_col] = self._grid[from_row][from_col]
        self._grid[from_row][from_col] = None

    def clear(self) -> None:
        self._grid = _empty_grid()

    def initialize(self) -> None:
        """Reset to the standard starting position."""
        self.clear()
        for col in range(8):
            self._grid[1][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[6][col] = Piece(Color.BLACK, PieceType.PAWN)
        for col, pt in enumerate(_BACK_RANK):
            self._grid[0][col] = Piece(Color.WHITE, pt)
            self._grid[7][col] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initialize()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = [p.letter if p else "." for p in self._grid[row]]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
