"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Only reveal actions are considered unless ``use_flags`` is set.
    """

    def __init__(
        self,
        rows: int = 6,
        cols: int = 6,
        seed: Optional[int] = None,
        use_flags: bool = False,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
            use_flags: Also pick flag-toggle actions.
        """
        super().__init__(rows, cols)
        self.rng = np.random.default_rng(seed)
        self.use_flags = use_flags

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell codes.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)
        if not self.use_flags:
            valid_actions = valid_actions[: self.total_cells]

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # No valid actions, the environment will ignore this one
            return 0

        return int(self.rng.choice(valid_indices))
