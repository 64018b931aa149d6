"""
Board module for Minesweeper.

Implements the game board with lazy first-click-safe mine placement,
flood revealing, flagging, and the win/loss state machine.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, CellView
from .difficulty import Difficulty, EASY

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    WAITING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


class MoveStatus(Enum):
    """Result of a single player action."""

    IGNORED = auto()
    REVEALED = auto()
    FLAGGED = auto()
    UNFLAGGED = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """
    Outcome of a reveal or flag action.

    Attributes:
        status: What the action did.
        changed: Positions whose visible state changed, in change order.
    """

    status: MoveStatus
    changed: Tuple[Position, ...] = ()

    @property
    def ignored(self) -> bool:
        return self.status == MoveStatus.IGNORED


IGNORED = MoveOutcome(MoveStatus.IGNORED)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    flag counting and win/lose conditions.
    """

    config: Difficulty = field(default_factory=lambda: EASY)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.WAITING
    _mines_placed: bool = False
    _safe_revealed: int = 0
    _flagged: int = 0
    _exploded: Optional[Position] = None

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def with_mines(
        cls,
        config: Difficulty,
        mines: Iterable[Position],
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        The first reveal still moves the game from WAITING to PLAYING
        but does not place any mines.

        Args:
            config: Board configuration; ``config.mines`` must match.
            mines: (row, col) positions of the mines.

        Raises:
            ValueError: If the layout does not fit the configuration.
        """
        board = cls(config)
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ValueError("Duplicate mine positions")
        if len(positions) != config.mines:
            raise ValueError(
                f"Expected {config.mines} mines, got {len(positions)}"
            )
        for row, col in positions:
            if not board.in_bounds(row, col):
                raise ValueError(f"Mine position ({row}, {col}) out of bounds")
            board._grid[row][col].is_mine = True
        board._calculate_adjacent_mines()
        board._mines_placed = True
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def place_mines(self, exclude_row: int, exclude_col: int) -> None:
        """
        Place mines at random, never on the excluded cell.

        Draws uniform random positions and rejects repeats and the
        excluded cell until ``config.mines`` distinct mines are placed,
        then recomputes every adjacency count.

        Args:
            exclude_row: Row of the cell to keep mine-free.
            exclude_col: Column of the cell to keep mine-free.
        """
        placed = 0
        while placed < self.config.mines:
            row = self.rng.randrange(self.config.rows)
            col = self.rng.randrange(self.config.cols)
            if (row, col) == (exclude_row, exclude_col):
                continue
            if self._grid[row][col].is_mine:
                continue
            self._grid[row][col].is_mine = True
            placed += 1

        self._calculate_adjacent_mines()
        self._mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            placed, self.config.rows, self.config.cols,
            exclude_row, exclude_col,
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if cell.is_mine:
                    cell.adjacent_mines = 0
                else:
                    cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for n_row, n_col in self.neighbors(row, col)
            if self._grid[n_row][n_col].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> MoveOutcome:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell and starts
        play. Empty cells (0 adjacent mines) flood-reveal their
        neighbors. Revealing a mine loses the game; revealing the last
        safe cell wins it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            MoveOutcome; status IGNORED when nothing changed.
        """
        if not self._can_reveal(row, col):
            return IGNORED

        if self._game_state == GameState.WAITING:
            self._handle_first_click(row, col)

        changed, hit_mine = self._flood_reveal(row, col)

        if hit_mine:
            self._exploded = (row, col)
            self._set_state(GameState.LOST)
            changed.extend(self._reveal_mines())
            return MoveOutcome(MoveStatus.LOST, tuple(changed))

        if self._check_win_condition():
            self._set_state(GameState.WON)
            changed.extend(self._reveal_mines())
            return MoveOutcome(MoveStatus.WON, tuple(changed))

        return MoveOutcome(MoveStatus.REVEALED, tuple(changed))

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state.is_terminal:
            return False
        if not self.in_bounds(row, col):
            return False
        return self._grid[row][col].state == CellState.HIDDEN

    def _handle_first_click(self, row: int, col: int) -> None:
        """Handle first click: place mines unless fixed, then start play."""
        if not self._mines_placed:
            self.place_mines(row, col)
        self._set_state(GameState.PLAYING)

    def _flood_reveal(self, row: int, col: int) -> Tuple[List[Position], bool]:
        """
        Reveal a cell, cascading through zero-count cells.

        Returns:
            (revealed positions in order, whether a mine was revealed).
        """
        changed: List[Position] = []
        pending = [(row, col)]
        seen = {(row, col)}

        while pending:
            cur_row, cur_col = pending.pop()
            cell = self._grid[cur_row][cur_col]
            # Flagged cells stay covered even inside a cascade
            if not cell.reveal():
                continue
            changed.append((cur_row, cur_col))

            if cell.is_mine:
                return changed, True

            self._safe_revealed += 1
            if cell.adjacent_mines > 0:
                continue

            for neighbor in self.neighbors(cur_row, cur_col):
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                if self._grid[neighbor[0]][neighbor[1]].is_hidden:
                    pending.append(neighbor)

        return changed, False

    def _reveal_mines(self) -> List[Position]:
        """Reveal every mine that is not flagged."""
        changed = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if cell.is_mine and cell.reveal():
                    changed.append((row, col))
        return changed

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._safe_revealed == self.config.safe_cells

    def _set_state(self, state: GameState) -> None:
        logger.debug("Game state %s -> %s", self._game_state.name, state.name)
        self._game_state = state

    def toggle_flag(self, row: int, col: int) -> MoveOutcome:
        """
        Toggle flag on a cell.

        Flags may be placed before the first reveal. The flag count is
        not limited by the number of mines.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            MoveOutcome with status FLAGGED, UNFLAGGED or IGNORED.
        """
        if self._game_state.is_terminal:
            return IGNORED
        if not self.in_bounds(row, col):
            return IGNORED

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return IGNORED

        if cell.is_flagged:
            self._flagged += 1
            status = MoveStatus.FLAGGED
        else:
            self._flagged -= 1
            status = MoveStatus.UNFLAGGED
        return MoveOutcome(status, ((row, col),))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_waiting(self) -> bool:
        """Check if the first reveal is still pending."""
        return self._game_state == GameState.WAITING

    @property
    def is_playing(self) -> bool:
        """Check if game is in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def is_over(self) -> bool:
        """Check if game has ended either way."""
        return self._game_state.is_terminal

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def flagged_count(self) -> int:
        return self._flagged

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.mines - self._flagged

    @property
    def revealed_count(self) -> int:
        """Number of safe cells revealed so far."""
        return self._safe_revealed

    @property
    def exploded(self) -> Optional[Position]:
        """Position of the mine that lost the game, if any."""
        return self._exploded

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Get the player-visible view of a cell, or None if invalid."""
        cell = self.get_cell(row, col)
        if cell is None:
            return None
        return cell.view(exploded=self._exploded == (row, col))

    def mine_positions(self) -> List[Position]:
        """List positions of all mines (empty before placement)."""
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        return np.array(
            [[cell.to_observation() for cell in row] for row in self._grid],
            dtype=np.int8,
        )

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of hidden, unflagged (row, col) positions; empty once
            the game is over.
        """
        if self.is_over:
            return []
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].state == CellState.HIDDEN
        ]
