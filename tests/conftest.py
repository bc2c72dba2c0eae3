"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from antichess.core.board import Board
from antichess.core.enums import Color
from antichess.core.notation import board_from_placement
from antichess.core.rules import MoveValidator, RuleOptions
from antichess.game.state import GameState, new_game


@pytest.fixture
def board() -> Board:
    return Board.initial()


@pytest.fixture
def validator(board: Board) -> MoveValidator:
    return MoveValidator(board)


@pytest.fixture
def make_validator() -> Callable[..., MoveValidator]:
    """Factory: validator over a board built from a placement string."""

    def _make(placement: str, options: RuleOptions | None = None) -> MoveValidator:
        return MoveValidator(board_from_placement(placement), options)

    return _make


@pytest.fixture
def game() -> GameState:
    return new_game()


@pytest.fixture
def make_game() -> Callable[..., GameState]:
    """Factory: session set up from a placement with a given side to move."""

    def _make(
        placement: str,
        side_to_move: Color = Color.WHITE,
        options: RuleOptions | None = None,
    ) -> GameState:
        state = GameState(options if options is not None else RuleOptions())
        state.setup(placement, side_to_move)
        return state

    return _make
