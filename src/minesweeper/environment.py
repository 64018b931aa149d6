"""
Gymnasium environment wrapper for Minesweeper.

Lets automated players drive a GameSession through the standard
gymnasium interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import MoveStatus
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .render import render_board
from .session import GameSession


REWARDS: Dict[MoveStatus, float] = {
    MoveStatus.IGNORED: -0.1,
    MoveStatus.REVEALED: 1.0,
    MoveStatus.FLAGGED: 0.0,
    MoveStatus.UNFLAGGED: 0.0,
    MoveStatus.WON: 10.0,
    MoveStatus.LOST: -10.0,
}


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        larger actions toggle a flag on cell i - rows * cols.

    Rewards:
        - +1 for revealing safe cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an ignored action (revealed/flagged cell, game over)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: str = "easy",
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Preset name (easy, medium or hard).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.session = GameSession(difficulty)
        self.render_mode = render_mode
        rows, cols = self.session.rows, self.session.cols
        self._cells = rows * cols

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(rows, cols),
            dtype=np.int8,
        )
        # One reveal and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session.reseed(seed)
        self.session.new_game()
        self._steps = 0

        return self.session.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal (row * cols + col) or flag (cells + index).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if is_flag:
            outcome = self.session.toggle_flag(row, col)
        else:
            outcome = self.session.reveal(row, col)

        reward = REWARDS[outcome.status]
        terminated = self.session.state.is_terminal
        info = self._get_info()
        info["status"] = outcome.status.name

        if self.render_mode == "human":
            self.render()

        return self.session.observation(), reward, terminated, False, info

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        is_flag = action >= self._cells
        index = action - self._cells if is_flag else action
        row, col = divmod(index, self.session.cols)
        return is_flag, row, col

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "total_safe": self.session.difficulty.safe_cells,
            "remaining_mines": board.remaining_mines,
            "game_state": board.game_state.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.session)
        if self.render_mode == "human":
            print(render_board(self.session))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Reveal actions are
            valid on hidden cells, flag actions on hidden or flagged
            cells; nothing is valid once the game is over.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session.state.is_terminal:
            return mask

        obs = self.session.observation().flatten()
        mask[: self._cells] = obs == HIDDEN_CODE
        mask[self._cells:] = (obs == HIDDEN_CODE) | (obs == FLAGGED_CODE)
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    difficulty: str = "easy",
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        difficulty: Preset name for every environment.
        asynchronous: Run environments in subprocesses.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(difficulty=difficulty)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
