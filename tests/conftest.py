"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, Cell, Difficulty, EASY, GameSession


# Fixed layout used by the scenario tests
SCENARIO_MINES = [(0, 0), (0, 1), (5, 5), (3, 3)]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Recorder:
    """Collects every event published on a bus."""

    def __init__(self) -> None:
        self.events: List[object] = []

    def __call__(self, event: object) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> List[object]:
        return [event for event in self.events if isinstance(event, event_type)]

    def clear(self) -> None:
        self.events.clear()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create an easy 6x6 board with 4 mines."""
    return Board(EASY, random.Random(1234))


@pytest.fixture
def scenario_board() -> Board:
    """Create a 6x6 board with mines at fixed positions."""
    return Board.with_mines(EASY, SCENARIO_MINES)


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(Difficulty("small", 3, 3, 1), random.Random(7))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(Difficulty("empty", 5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def session(clock: FakeClock, recorder: Recorder) -> GameSession:
    """Easy session with a recorder subscribed to every event."""
    game = GameSession("easy", seed=42, clock=clock)
    game.bus.subscribe_all(recorder)
    return game


@pytest.fixture
def scenario_session(session: GameSession, recorder: Recorder) -> GameSession:
    """Session loaded with the fixed scenario layout."""
    session.load(Board.with_mines(EASY, SCENARIO_MINES))
    recorder.clear()
    return session
