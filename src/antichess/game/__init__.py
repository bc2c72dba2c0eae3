"""Game management layer: session state machine and controller.

Quick start::

    from antichess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move("e2", "e4")
"""

from antichess.game.controller import GameController, GameEvents
from antichess.game.interfaces import GameEndReason, GamePhase
from antichess.game.state import GameState, new_game

__all__ = [
    "GameController",
    "GameEndReason",
    "GameEvents",
    "GamePhase",
    "GameState",
    "new_game",
]
