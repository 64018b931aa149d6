"""
Difficulty presets for Minesweeper.

A difficulty fixes the board dimensions and mine count for a game.
"""
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Difficulty Configuration
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Configuration for a Minesweeper board.

    Attributes:
        name: Preset name shown to the player.
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    name: str = "custom"
    rows: int = 6
    cols: int = 6
    mines: int = 4

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mines


# Preset difficulty levels
EASY = Difficulty("easy", 6, 6, 4)
MEDIUM = Difficulty("medium", 16, 16, 40)
HARD = Difficulty("hard", 16, 30, 99)

DIFFICULTIES: Dict[str, Difficulty] = {
    preset.name: preset for preset in (EASY, MEDIUM, HARD)
}


def get_difficulty(name: str) -> Difficulty:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ValueError(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None
