"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from antichess.core.enums import Color, PieceType

# kind → (letter, white glyph, black glyph)
_KINDS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("P", "♙", "♟"),
    PieceType.KNIGHT: ("N", "♘", "♞"),
    PieceType.BISHOP: ("B", "♗", "♝"),
    PieceType.ROOK: ("R", "♖", "♜"),
    PieceType.QUEEN: ("Q", "♕", "♛"),
    PieceType.KING: ("K", "♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece is nothing more than its kind and color: no move counters."""

    color: Color
    piece_type: PieceType

    @property
    def letter(self) -> str:
        """Kind letter, uppercase for White and lowercase for Black."""
        letter = _KINDS[self.piece_type][0]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode glyph for the board diagram, e.g. ♞."""
        return _KINDS[self.piece_type][1 + int(self.color)]


def kind_from_letter(letter: str) -> PieceType | None:
    """Piece kind for an uppercase kind letter, or None."""
    for kind, (kind_letter, _, _) in _KINDS.items():
        if kind_letter == letter:
            return kind
    return None
