"""GameController: the orchestrator of an anti-chess game.

Coordinates: GameState, MoveValidator, turn order.
Emits events via simple callbacks so a front-end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from antichess.core.enums import Color, GameResult
from antichess.core.move import Move
from antichess.core.rules import RuleOptions
from antichess.game.interfaces import GamePhase
from antichess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
RejectedCallback = Callable[[str, str, list[Move]], None]  # from, to, forced
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a game: validates moves, applies them, detects the end,
    switches turns and notifies listeners.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    def new_game(
        self,
        options: RuleOptions | None = None,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game."""
        self._state = GameState(options if options is not None else RuleOptions())
        self._state.setup(placement, side_to_move)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, from_sq: str, to_sq: str) -> bool:
        """Submit a move for the side to move. Returns True if legal and applied."""
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return False

        if not state.is_valid_move(from_sq, to_sq):
            forced = state.available_captures()
            _LOGGER.debug(
                "Rejected %s %s for %s (%d forced captures)",
                from_sq,
                to_sq,
                state.side_to_move,
                len(forced),
            )
            self._emit_rejected(from_sq, to_sq, forced)
            return False

        move = Move.parse(from_sq, to_sq)
        state.apply_move(move.from_sq, move.to_sq)
        _LOGGER.debug("%s played %s", state.side_to_move, move)
        self._emit_move(move)

        if state.check_game_over() != GameResult.IN_PROGRESS:
            self._emit_game_over(state.result)
            return True

        state.advance_turn()
        return True

    def resign(self, color: Color | None = None) -> None:
        """Player of *color* (default: side to move) forfeits."""
        if self._state.is_game_over:
            return
        self._state.resign(color if color is not None else self._state.side_to_move)
        self._emit_game_over(self._state.result)

    def forced_moves(self) -> list[Move]:
        """Mandatory captures for the side to move (empty when free to move)."""
        return self._state.available_captures()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_rejected(self, from_sq: str, to_sq: str, forced: list[Move]) -> None:
        for cb in self.events.on_rejected:
            cb(from_sq, to_sq, forced)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
