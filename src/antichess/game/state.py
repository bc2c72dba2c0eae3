"""Game session: board, side to move and the result state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from antichess.core.board import Board
from antichess.core.enums import Color, GameResult
from antichess.core.move import Move
from antichess.core.notation import board_from_placement
from antichess.core.rules import MoveValidator, RuleOptions
from antichess.game.interfaces import GameEndReason, GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """One game session: owns its board and whose turn it is.

    This is a pure data/logic class with no I/O and no threading. Each concurrent
    game needs its own instance.
    """

    options: RuleOptions = field(default_factory=RuleOptions)
    board: Board = field(default_factory=Board, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a custom placement."""
        if placement is None:
            self.board = Board.initial()
        else:
            self.board = board_from_placement(placement)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE

    # ── Rule queries ─────────────────────────────────────────────────────

    @property
    def validator(self) -> MoveValidator:
        return MoveValidator(self.board, self.options)

    def is_valid_move(self, from_sq: str, to_sq: str) -> bool:
        """Whether the side to move may play *from_sq* → *to_sq*."""
        return self.validator.is_valid_move(from_sq, to_sq, self.side_to_move)

    def available_captures(self) -> list[Move]:
        """Captures the side to move is obliged to choose from (may be empty)."""
        return self.validator.available_captures(self.side_to_move)

    def must_capture(self) -> bool:
        """Whether the side to move is currently obliged to capture."""
        return self.validator.has_captures(self.side_to_move)

    def legal_moves(self) -> list[Move]:
        return self.validator.legal_moves(self.side_to_move)

    def count_pieces(self, color: Color) -> int:
        return self.board.count_pieces(color)

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, from_sq: str, to_sq: str) -> None:
        """Apply a move on the board.

        Caller is responsible for legality check; the turn is not advanced.
        """
        self.board.apply_move(from_sq, to_sq)

    def advance_turn(self) -> Color:
        """Hand the move to the other side and return it."""
        self.side_to_move = self.side_to_move.opposite
        return self.side_to_move

    def check_game_over(self) -> GameResult:
        """Finish the game if a color has run out of pieces."""
        for color in (Color.WHITE, Color.BLACK):
            if self.board.count_pieces(color) == 0:
                winner = color if self.options.empty_side_wins else color.opposite
                self._finish(GameResult.win_for(winner), GameEndReason.ALL_PIECES_LOST)
                break
        return self.result

    def resign(self, color: Color) -> None:
        self._finish(GameResult.win_for(color.opposite), GameEndReason.RESIGNATION)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        return self.result.winner

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s (%s)", result.name, reason.name)


def new_game(options: RuleOptions | None = None) -> GameState:
    """Start a session from the standard position with White to move."""
    state = GameState(options if options is not None else RuleOptions())
    state.setup()
    return state
