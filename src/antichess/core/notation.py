"""Board placement notation (the first field of a FEN record)."""

from __future__ import annotations

from antichess.core.board import Board
from antichess.core.enums import Color
from antichess.core.piece import Piece, kind_from_letter

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def piece_from_char(char: str) -> Piece:
    """Create piece from a placement character, e.g. 'n' → black knight."""
    kind = kind_from_letter(char.upper()) if len(char) == 1 else None
    if kind is None:
        raise ValueError(f"Invalid piece character: {char!r}")
    return Piece(Color.WHITE if char.isupper() else Color.BLACK, kind)


def board_from_placement(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    Only the placement is read; a full FEN record is accepted and its
    remaining fields are ignored since anti-chess keeps no castling or
    en-passant state.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Empty placement: {placement!r}")

    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[row, col] = piece_from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise a :class:`Board` to a FEN piece-placement field."""
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[row, col]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.letter
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
