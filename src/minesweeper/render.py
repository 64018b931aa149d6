"""
Text rendering for Minesweeper.

Draws a session's board as plain text and redraws it whenever the
session publishes a change.
"""
from typing import Callable, Dict, List

from .board import GameState
from .cell import CellState, CellView
from .events import CellsChanged, GameOver
from .session import GameSession


STATUS_MESSAGES: Dict[GameState, str] = {
    GameState.WAITING: "Click a cell to start the game!",
    GameState.PLAYING: "Click a cell to start the game!",
    GameState.WON: "Congratulations! You won!",
    GameState.LOST: "Game Over! Try again!",
}


def cell_symbol(view: CellView) -> str:
    """
    Single-character symbol for a cell.

    '.' hidden, 'F' flagged, ' ' empty, '1'-'8' counts,
    '*' mine, 'X' the mine that exploded.
    """
    if view.state == CellState.HIDDEN:
        return "."
    if view.state == CellState.FLAGGED:
        return "F"
    if view.is_mine:
        return "X" if view.exploded else "*"
    if view.adjacent_mines == 0:
        return " "
    return str(view.adjacent_mines)


def render_header(session: GameSession) -> str:
    """Mines-remaining counter, timer and status message."""
    return (
        f"Mines: {session.remaining_mines}   "
        f"Time: {session.elapsed_seconds():03d}   "
        f"[{session.difficulty.name}]\n"
        f"{STATUS_MESSAGES[session.state]}"
    )


def render_board(session: GameSession) -> str:
    """Render the header plus the grid with row and column indices."""
    width = len(str(max(session.rows, session.cols) - 1)) + 1
    label = " " * width
    lines: List[str] = [render_header(session)]
    lines.append(label + "".join(f"{col:>{width}}" for col in range(session.cols)))

    for row in range(session.rows):
        symbols = "".join(
            f"{cell_symbol(session.cell_view(row, col)):>{width}}"
            for col in range(session.cols)
        )
        lines.append(f"{row:>{width}}" + symbols)

    return "\n".join(lines)


# ============================================================================
# Terminal Renderer
# ============================================================================

class TerminalRenderer:
    """
    Redraws a session's board whenever its cells change.

    Args:
        session: Session to watch.
        write: Output function receiving whole frames (default print).
    """

    def __init__(
        self,
        session: GameSession,
        write: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self.write = write
        self.frames = 0
        self._unsubscribe = [
            session.bus.subscribe(CellsChanged, self._on_cells_changed),
            session.bus.subscribe(GameOver, self._on_game_over),
        ]

    def draw(self) -> None:
        self.frames += 1
        self.write(render_board(self.session))

    def close(self) -> None:
        """Stop listening to the session."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    def _on_cells_changed(self, event: CellsChanged) -> None:
        if event.cells:
            self.draw()

    def _on_game_over(self, event: GameOver) -> None:
        outcome = "won" if event.won else "lost"
        self.write(f"You {outcome} in {event.elapsed} seconds.")
