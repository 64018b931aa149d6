"""
Minesweeper game module.

Provides the board engine, game session, events and presentation
helpers for a single-player Minesweeper game.
"""
from .cell import Cell, CellState, CellView
from .difficulty import Difficulty, DIFFICULTIES, EASY, MEDIUM, HARD, get_difficulty
from .board import Board, GameState, MoveOutcome, MoveStatus
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
from .session import GameSession
from .render import TerminalRenderer, render_board
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Difficulty",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "get_difficulty",
    "Board",
    "GameState",
    "MoveOutcome",
    "MoveStatus",
    "BoardReset",
    "CellsChanged",
    "EventBus",
    "GameOver",
    "MineCountChanged",
    "StateChanged",
    "TimerStarted",
    "TimerStopped",
    "TimerTick",
    "GameTimer",
    "GameSession",
    "TerminalRenderer",
    "render_board",
    "MinesweeperEnv",
    "make_vec_env",
]
