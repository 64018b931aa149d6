"""
Game session for Minesweeper.

A GameSession owns one board at a time plus its timer and event bus.
The presentation layer drives it with reveal/flag/new-game calls and
redraws from the events it publishes.
"""
import logging
import random
from typing import Callable, Optional

import numpy as np

from .board import Board, GameState, MoveOutcome
from .cell import CellView
from .difficulty import Difficulty, get_difficulty
from .events import (
    BoardReset,
    CellsChanged,
    EventBus,
    GameOver,
    MineCountChanged,
    StateChanged,
    TimerStarted,
    TimerStopped,
    TimerTick,
)
from .timer import GameTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One player's game, from difficulty choice through win or loss.

    Args:
        difficulty: Preset name to start with.
        seed: Seed for mine placement (random when None).
        bus: Event bus to publish on; a private one is created if omitted.
        clock: Monotonic clock for the timer (default time.monotonic).
    """

    def __init__(
        self,
        difficulty: str = "easy",
        seed: Optional[int] = None,
        bus: Optional[EventBus] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.bus = bus or EventBus()
        self._rng = random.Random(seed)
        self._timer = GameTimer(clock)
        self._difficulty = get_difficulty(difficulty)
        self._board = Board(self._difficulty, self._rng)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def create(self, difficulty: str) -> None:
        """
        Discard the current board and start a new one for a preset.

        Raises:
            ValueError: If the preset name is unknown.
        """
        self._start(Board(get_difficulty(difficulty), self._rng))

    def new_game(self) -> None:
        """Start over with the current difficulty."""
        self._start(Board(self._difficulty, self._rng))

    def load(self, board: Board) -> None:
        """
        Start a game on a prepared board, e.g. a fixed mine layout.

        Raises:
            ValueError: If the board has already been played.
        """
        if not board.is_waiting:
            raise ValueError(
                f"Board must be unplayed, got {board.game_state.name}"
            )
        self._start(board)

    def reseed(self, seed: Optional[int]) -> None:
        """Reseed mine placement for subsequent games."""
        self._rng.seed(seed)

    def _start(self, board: Board) -> None:
        previous = self._board.game_state
        self._timer.stop()
        self._timer.reset()
        self._board = board
        self._difficulty = board.config
        logger.debug(
            "New %s game (%dx%d, %d mines)",
            board.config.name, board.config.rows,
            board.config.cols, board.config.mines,
        )

        self.bus.publish(BoardReset(board.config))
        self.bus.publish(MineCountChanged(board.remaining_mines))
        self.bus.publish(StateChanged(previous, board.game_state))
        self.bus.publish(CellsChanged(tuple(
            (row, col)
            for row in range(board.config.rows)
            for col in range(board.config.cols)
        )))

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> MoveOutcome:
        """
        Reveal a cell and publish the resulting events.

        Returns:
            The board's MoveOutcome; IGNORED actions publish nothing.
        """
        previous = self._board.game_state
        outcome = self._board.reveal(row, col)
        if outcome.ignored:
            return outcome

        # Timer follows the board before any handler runs.
        current = self._board.game_state
        started = previous == GameState.WAITING and self._timer.start()
        if current.is_terminal:
            self._timer.stop()

        if previous == GameState.WAITING:
            self.bus.publish(StateChanged(previous, GameState.PLAYING))
            if started:
                self.bus.publish(TimerStarted())
            previous = GameState.PLAYING

        self.bus.publish(CellsChanged(outcome.changed))

        if current.is_terminal:
            self._finish(previous, current)
        return outcome

    def toggle_flag(self, row: int, col: int) -> MoveOutcome:
        """Toggle a flag and publish the new remaining-mines count."""
        outcome = self._board.toggle_flag(row, col)
        if outcome.ignored:
            return outcome

        self.bus.publish(CellsChanged(outcome.changed))
        self.bus.publish(MineCountChanged(self._board.remaining_mines))
        return outcome

    def tick(self) -> int:
        """
        Advance the elapsed-time display.

        Called by the presentation layer's periodic tick source.

        Returns:
            Elapsed whole seconds.
        """
        elapsed = self._timer.elapsed_seconds()
        if self._timer.is_running:
            self.bus.publish(TimerTick(elapsed))
        return elapsed

    def _finish(self, previous: GameState, current: GameState) -> None:
        elapsed = self._timer.elapsed_seconds()
        won = current == GameState.WON
        logger.debug("Game %s after %ds", "won" if won else "lost", elapsed)

        self.bus.publish(StateChanged(previous, current))
        self.bus.publish(TimerStopped(elapsed))
        self.bus.publish(GameOver(won, elapsed))

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def state(self) -> GameState:
        return self._board.game_state

    @property
    def rows(self) -> int:
        return self._difficulty.rows

    @property
    def cols(self) -> int:
        return self._difficulty.cols

    @property
    def remaining_mines(self) -> int:
        return self._board.remaining_mines

    @property
    def timer_running(self) -> bool:
        return self._timer.is_running

    def elapsed_seconds(self) -> int:
        return self._timer.elapsed_seconds()

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Visible state of a cell, or None when out of bounds."""
        return self._board.cell_view(row, col)

    def observation(self) -> np.ndarray:
        return self._board.get_observation()

