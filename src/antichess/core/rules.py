"""Anti-chess move legality: piece geometry, mandatory capture, move gate."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from antichess.core.enums import Color, PieceType
from antichess.core.move import Move
from antichess.core.types import (
    ALL_COORDS,
    coords_to_square,
    is_valid_square,
    square_to_coords,
)

if TYPE_CHECKING:
    from antichess.core.board import Board
    from antichess.core.piece import Piece

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Immutable rule-variant settings.

    Args:
        allow_self_capture: Accept a non-capturing move whose destination
            holds a piece of the mover's own color (the piece is
            overwritten). Off by default.
        empty_side_wins: When a color has no pieces left, declare *that*
            color the winner instead of its opponent.
    """

    allow_self_capture: bool = False
    empty_side_wins: bool = False

    @classmethod
    def standard(cls) -> RuleOptions:
        return cls()

    @classmethod
    def original(cls) -> RuleOptions:
        """Behaviour of the classic terminal program this engine replaces."""
        return cls(allow_self_capture=True, empty_side_wins=True)


class MoveValidator:
    """Decides move legality on a live :class:`Board`.

    The validator keeps no state of its own between calls and never
    mutates or copies the board it reads.
    """

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: RuleOptions | None = None) -> None:
        self._board = board
        self._options = options if options is not None else RuleOptions()

    # -- Public API ---------------------------------------------------------

    def is_valid_move(self, from_sq: str, to_sq: str, player: Color) -> bool:
        """Top-level legality gate for *player* moving *from_sq* → *to_sq*."""
        if not is_valid_square(from_sq) or not is_valid_square(to_sq):
            return False
        from_sq = from_sq.lower()
        to_sq = to_sq.lower()
        if from_sq == to_sq:
            return False

        piece = self._board.piece_at(from_sq)
        if piece is None or piece.color != player:
            return False

        target = self._board.piece_at(to_sq)
        if (
            target is not None
            and target.color == player
            and not self._options.allow_self_capture
        ):
            return False

        captures = self.available_captures(player)
        if captures:
            return Move(from_sq, to_sq) in captures

        return self.is_valid_piece_move(from_sq, to_sq, piece)

    def is_valid_piece_move(self, from_sq: str, to_sq: str, piece: Piece) -> bool:
        """Movement geometry for *piece*, ignoring turn and mandatory capture."""
        from_row, from_col = square_to_coords(from_sq)
        to_row, to_col = square_to_coords(to_sq)
        return self._is_valid_geometry(piece, from_row, from_col, to_row, to_col)

    def available_captures(self, player: Color) -> list[Move]:
        """Every capture *player* can make, in row-major order of (from, to)."""
        return list(self._iter_captures(player))

    def has_captures(self, player: Color) -> bool:
        """Whether *player* is currently forced to capture."""
        return next(self._iter_captures(player), None) is not None

    def legal_moves(self, player: Color) -> list[Move]:
        """All moves accepted by :meth:`is_valid_move`, in scan order."""
        captures = self.available_captures(player)
        if captures:
            return captures

        board = self._board
        moves: list[Move] = []
        for from_row, from_col in ALL_COORDS:
            piece = board[from_row, from_col]
            if piece is None or piece.color != player:
                continue
            for to_row, to_col in ALL_COORDS:
                if (to_row, to_col) == (from_row, from_col):
                    continue
                target = board[to_row, to_col]
                if (
                    target is not None
                    and target.color == player
                    and not self._options.allow_self_capture
                ):
                    continue
                if self._is_valid_geometry(piece, from_row, from_col, to_row, to_col):
                    moves.append(
                        Move(
                            coords_to_square(from_row, from_col),
                            coords_to_square(to_row, to_col),
                        )
                    )
        return moves

    # -- Capture scan -------------------------------------------------------

    def _iter_captures(self, player: Color) -> Iterator[Move]:
        board = self._board
        for from_row, from_col in ALL_COORDS:
            piece = board[from_row, from_col]
            if piece is None or piece.color != player:
                continue
            for to_row, to_col in ALL_COORDS:
                target = board[to_row, to_col]
                if target is None or target.color == player:
                    continue
                if self._is_valid_geometry(piece, from_row, from_col, to_row, to_col):
                    yield Move(
                        coords_to_square(from_row, from_col),
                        coords_to_square(to_row, to_col),
                    )

    # -- Per-piece geometry -------------------------------------------------

    def _is_valid_geometry(
        self, piece: Piece, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._pawn(piece.color, from_row, from_col, to_row, to_col)
        if pt == PieceType.ROOK:
            return self._rook(from_row, from_col, to_row, to_col)
        if pt == PieceType.KNIGHT:
            return _knight(from_row, from_col, to_row, to_col)
        if pt == PieceType.BISHOP:
            return self._bishop(from_row, from_col, to_row, to_col)
        if pt == PieceType.QUEEN:
            return self._rook(from_row, from_col, to_row, to_col) or self._bishop(
                from_row, from_col, to_row, to_col
            )
        if pt == PieceType.KING:
            return _king(from_row, from_col, to_row, to_col)
        return False

    def _pawn(
        self, color: Color, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        board = self._board
        direction = _PAWN_DIRECTION[color]

        if from_col == to_col:
            # Single push
            if to_row == from_row + direction:
                return board.is_empty(to_row, to_col)
            # Double push from the start row
            if from_row == _PAWN_START_ROW[color] and to_row == from_row + 2 * direction:
                return board.is_empty(from_row + direction, to_col) and board.is_empty(
                    to_row, to_col
                )
            return False

        # Diagonal step only with something to take
        if abs(from_col - to_col) == 1 and to_row == from_row + direction:
            return not board.is_empty(to_row, to_col)
        return False

    def _rook(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        if from_row != to_row and from_col != to_col:
            return False
        return self._board.is_path_clear(from_row, from_col, to_row, to_col)

    def _bishop(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        d_row = abs(to_row - from_row)
        if d_row == 0 or d_row != abs(to_col - from_col):
            return False
        return self._board.is_path_clear(from_row, from_col, to_row, to_col)


def _knight(from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    deltas = (abs(to_row - from_row), abs(to_col - from_col))
    return deltas in ((2, 1), (1, 2))


def _king(from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    return abs(to_row - from_row) <= 1 and abs(to_col - from_col) <= 1
