"""
Base agent interface for automated Minesweeper players.

Defines the interface an agent needs to play MinesweeperEnv.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minesweeper.cell import FLAGGED_CODE, HIDDEN_CODE
from minesweeper.difficulty import Difficulty


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Actions follow MinesweeperEnv: the first rows * cols indices reveal
    a cell, the next rows * cols toggle a flag.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
        """
        self.rows = rows
        self.cols = cols
        self.total_cells = rows * cols

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty, **kwargs) -> "BaseAgent":
        """Create an agent sized for a difficulty preset."""
        return cls(difficulty.rows, difficulty.cols, **kwargs)

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell codes.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def reveal_action(self, row: int, col: int) -> int:
        """Action index that reveals (row, col)."""
        return row * self.cols + col

    def flag_action(self, row: int, col: int) -> int:
        """Action index that toggles a flag on (row, col)."""
        return self.total_cells + row * self.cols + col

    def describe_action(self, action: int) -> Tuple[str, int, int]:
        """Convert an action index to ("reveal" | "flag", row, col)."""
        kind = "flag" if action >= self.total_cells else "reveal"
        row, col = divmod(action % self.total_cells, self.cols)
        return kind, row, col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell codes.

        Returns:
            Boolean mask of length 2 * rows * cols.
        """
        flat_obs = observation.flatten()
        hidden = flat_obs == HIDDEN_CODE
        return np.concatenate([hidden, hidden | (flat_obs == FLAGGED_CODE)])

    def reset(self) -> None:
        """Reset agent state for new episode."""
