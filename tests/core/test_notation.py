"""Tests for board placement notation."""

import pytest

from antichess.core.board import Board
from antichess.core.enums import Color, PieceType
from antichess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    piece_from_char,
)
from antichess.core.piece import Piece


class TestPlacementParse:
    def test_starting_placement(self) -> None:
        assert board_from_placement(STARTING_PLACEMENT) == Board.initial()

    def test_full_fen_accepted(self) -> None:
        fen = STARTING_PLACEMENT + " w KQkq - 0 1"
        assert board_from_placement(fen) == Board.initial()

    def test_sparse(self) -> None:
        board = board_from_placement("k7/8/8/8/8/8/8/7R")
        assert board.piece_at("a8") == Piece(Color.BLACK, PieceType.KING)
        assert board.piece_at("h1") == Piece(Color.WHITE, PieceType.ROOK)
        assert board.count_pieces(Color.WHITE) == 1
        assert board.count_pieces(Color.BLACK) == 1

    def test_empty_board(self) -> None:
        assert board_from_placement("8/8/8/8/8/8/8/8") == Board()

    @pytest.mark.parametrize(
        "placement",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid(self, placement: str) -> None:
        with pytest.raises(ValueError):
            board_from_placement(placement)


class TestPlacementSerialise:
    def test_starting(self) -> None:
        assert board_to_placement(Board.initial()) == STARTING_PLACEMENT

    def test_after_move(self) -> None:
        board = Board.initial()
        board.apply_move("e2", "e4")
        assert (
            board_to_placement(board)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
        )


class TestPiece:
    def test_from_char(self) -> None:
        assert piece_from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)
        assert piece_from_char("Q") == Piece(Color.WHITE, PieceType.QUEEN)

    @pytest.mark.parametrize("char", ["x", "", "Kq", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            piece_from_char(char)

    def test_letter(self) -> None:
        assert Piece(Color.WHITE, PieceType.QUEEN).letter == "Q"
        assert Piece(Color.BLACK, PieceType.KNIGHT).letter == "n"

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"
        assert Piece(Color.BLACK, PieceType.QUEEN).symbol == "♛"

    def test_letters_round_trip(self) -> None:
        for color in Color:
            for kind in PieceType:
                piece = Piece(color, kind)
                assert piece_from_char(piece.letter) == piece
