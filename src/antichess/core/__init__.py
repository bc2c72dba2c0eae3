"""Core domain layer: pure anti-chess logic with zero external dependencies.

Quick start::

    from antichess.core import Board, Color, MoveValidator

    board = Board.initial()
    validator = MoveValidator(board)
    validator.is_valid_move("a2", "a4", Color.WHITE)  # True
"""

from antichess.core.board import Board
from antichess.core.enums import Color, GameResult, PieceType
from antichess.core.move import Move
from antichess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    piece_from_char,
)
from antichess.core.piece import Piece
from antichess.core.rules import MoveValidator, RuleOptions
from antichess.core.types import (
    ALL_SQUARES,
    Coords,
    coords_to_square,
    is_valid_square,
    normalize_square,
    square_to_coords,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Coords",
    "coords_to_square",
    "is_valid_square",
    "normalize_square",
    "square_to_coords",
    # Domain objects
    "Board",
    "Move",
    "MoveValidator",
    "Piece",
    "RuleOptions",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "piece_from_char",
]
