"""Terminal front-end: board rendering and the interactive command loop."""

from __future__ import annotations

from collections.abc import Callable

from antichess.core.board import Board
from antichess.core.enums import Color, GameResult
from antichess.core.move import Move
from antichess.game.controller import GameController
from antichess.game.interfaces import GameEndReason

_FILE_HEADER = "   a  b  c  d  e  f  g  h"

NO_MOVES_HINT = 'No legal moves available. Type "quit" to resign.'

HELP_TEXT = "\n".join(
    (
        "Commands:",
        '- Enter move in format "a2 a4"',
        '- Type "display" to show the board',
        '- Type "help" to show this message',
        '- Type "quit" to forfeit the game',
    )
)


def render_board(board: Board) -> str:
    """Board diagram with rank 8 on top and Unicode piece glyphs."""
    lines = [_FILE_HEADER]
    for row in range(7, -1, -1):
        cells: list[str] = []
        for col in range(8):
            piece = board[row, col]
            if piece is not None:
                cells.append(f" {piece.symbol} ")
            elif (row + col) % 2 == 0:
                cells.append(" : ")  # dark square
            else:
                cells.append(" . ")
        lines.append(f"{row + 1} {''.join(cells)} {row + 1}")
    lines.append(_FILE_HEADER)
    return "\n".join(lines)


class ConsoleSession:
    """Line-oriented game loop around a :class:`GameController`.

    Input and output are injectable so the loop can be driven by tests.
    """

    def __init__(
        self,
        controller: GameController,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._ctrl = controller
        self._input = input_fn
        self._output = output_fn
        controller.events.on_rejected.append(self._on_rejected)
        controller.events.on_game_over.append(self._on_game_over)

    def run(self) -> GameResult:
        """Play until the game ends or input runs out. Returns the result."""
        self._output("\nWelcome to Anti-Chess!")
        self._output(HELP_TEXT + "\n")

        show_board = True
        while not self._ctrl.state.is_game_over:
            state = self._ctrl.state
            if show_board:
                self._output(render_board(state.board))
                self._output(f"\n{state.side_to_move}'s turn")
                if state.must_capture():
                    self._output("You must capture this turn.")
                elif not state.legal_moves():
                    self._output(NO_MOVES_HINT)
            show_board = True

            try:
                line = self._input("Enter your move: ")
            except EOFError:
                break
            command = line.strip().lower()

            if command == "quit":
                self._ctrl.resign()
                break
            if command in ("display", ""):
                continue
            if command == "help":
                self._output(HELP_TEXT)
                show_board = False
                continue

            parts = command.split()
            if len(parts) != 2:
                self._output('Invalid input format. Use format "a2 a4"')
                show_board = False
                continue

            if not self._ctrl.submit_move(parts[0], parts[1]):
                show_board = False

        return self._ctrl.state.result

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_rejected(self, from_sq: str, to_sq: str, forced: list[Move]) -> None:
        if forced:
            self._output("Capture is mandatory! Available captures:")
            for move in forced:
                self._output(str(move))
        else:
            self._output("Invalid move. Try again.")

    def _on_game_over(self, result: GameResult) -> None:
        state = self._ctrl.state
        winner = result.winner
        if winner is None:
            return
        self._output(render_board(state.board))
        if state.end_reason == GameEndReason.RESIGNATION:
            loser = winner.opposite
            self._output(f"{loser} forfeits. {_title(winner)} wins!")
        elif winner == Color.WHITE and state.count_pieces(Color.WHITE) == 0:
            self._output("White wins by losing all pieces!")
        elif winner == Color.BLACK and state.count_pieces(Color.BLACK) == 0:
            self._output("Black wins by losing all pieces!")
        else:
            self._output(
                f"{_title(winner)} wins: {winner.opposite} has no pieces left!"
            )


def _title(color: Color) -> str:
    return str(color).capitalize()
