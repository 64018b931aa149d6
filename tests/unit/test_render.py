"""
Unit tests for text rendering and the interactive command loop.
"""
from typing import Callable, List

import pytest
from minesweeper import CellState, CellView, GameSession, GameState, TerminalRenderer, render_board
from minesweeper.cli import Command, HELP_TEXT, parse_command, run_interactive
from minesweeper.render import cell_symbol


def scripted(lines: List[str]) -> Callable[[], str]:
    """Input function that replays lines then signals end of input."""
    remaining = iter(lines)

    def read() -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


# ============================================================================
# Rendering Tests
# ============================================================================

class TestCellSymbol:
    """Test per-cell symbols."""

    @pytest.mark.parametrize(
        "view, symbol",
        [
            (CellView(), "."),
            (CellView(CellState.FLAGGED), "F"),
            (CellView(CellState.REVEALED), " "),
            (CellView(CellState.REVEALED, adjacent_mines=3), "3"),
            (CellView(CellState.REVEALED, is_mine=True), "*"),
            (CellView(CellState.REVEALED, is_mine=True, exploded=True), "X"),
        ],
    )
    def test_symbols(self, view: CellView, symbol: str) -> None:
        assert cell_symbol(view) == symbol


class TestRenderBoard:
    """Test whole-board rendering."""

    def test_fresh_board(self, session: GameSession) -> None:
        lines = render_board(session).split("\n")
        assert lines[0] == "Mines: 4   Time: 000   [easy]"
        assert lines[1] == "Click a cell to start the game!"
        assert lines[2] == "   0 1 2 3 4 5"
        assert lines[3] == " 0 . . . . . ."
        assert len(lines) == 2 + 1 + 6

    def test_flood_and_numbers(self, scenario_session: GameSession) -> None:
        scenario_session.reveal(0, 4)
        lines = render_board(scenario_session).split("\n")
        assert lines[1] == "Click a cell to start the game!"
        assert lines[3].rstrip() == " 0 . . 1"
        assert len(lines[3]) == 14
        assert lines[7] == " 4 . . . . 2 1"

    def test_loss_marks_exploded_mine(self, scenario_session: GameSession) -> None:
        scenario_session.toggle_flag(5, 5)
        scenario_session.reveal(0, 1)
        lines = render_board(scenario_session).split("\n")
        assert lines[0].startswith("Mines: 3 ")
        assert lines[1] == "Game Over! Try again!"
        assert lines[3] == " 0 * X . . . ."
        assert lines[8] == " 5 . . . . . F"

    def test_negative_mine_counter(self, session: GameSession) -> None:
        for col in range(6):
            session.toggle_flag(0, col)
        assert render_board(session).startswith("Mines: -2 ")

    def test_wide_board_pads_columns(self, session: GameSession) -> None:
        session.create("hard")
        lines = render_board(session).split("\n")
        assert lines[2].startswith("     0  1  2")
        assert lines[2].endswith(" 29")
        assert lines[3].startswith("  0  .  .")


class TestTerminalRenderer:
    """Test event-driven redraws."""

    def test_redraws_on_cell_changes_only(
        self, scenario_session: GameSession
    ) -> None:
        frames: List[str] = []
        renderer = TerminalRenderer(scenario_session, frames.append)

        scenario_session.reveal(2, 2)
        scenario_session.reveal(2, 2)
        scenario_session.toggle_flag(5, 5)

        assert renderer.frames == 2
        assert len(frames) == 2

    def test_game_over_message(self, scenario_session: GameSession) -> None:
        output: List[str] = []
        TerminalRenderer(scenario_session, output.append)
        scenario_session.reveal(3, 3)
        assert output[-1] == "You lost in 0 seconds."

    def test_close_stops_redraws(self, scenario_session: GameSession) -> None:
        output: List[str] = []
        renderer = TerminalRenderer(scenario_session, output.append)
        renderer.close()
        scenario_session.reveal(2, 2)
        assert output == []


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test text command parsing."""

    @pytest.mark.parametrize(
        "line, command",
        [
            ("r 1 2", Command("reveal", 1, 2)),
            ("reveal 0 5", Command("reveal", 0, 5)),
            ("F 3 4", Command("flag", 3, 4)),
            ("  n  ", Command("new")),
            ("d hard", Command("difficulty", argument="hard")),
            ("?", Command("help")),
            ("q", Command("quit")),
        ],
    )
    def test_valid_commands(self, line: str, command: Command) -> None:
        assert parse_command(line) == command

    @pytest.mark.parametrize(
        "line, message",
        [
            ("", "Empty command"),
            ("r 1", "Usage"),
            ("f a b", "must be integers"),
            ("d", "Usage"),
            ("jump", "Unknown command"),
        ],
    )
    def test_invalid_commands(self, line: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            parse_command(line)


# ============================================================================
# Interactive Loop Tests
# ============================================================================

class TestRunInteractive:
    """Test driving a session from scripted input."""

    def test_losing_game(self, scenario_session: GameSession) -> None:
        output: List[str] = []
        state = run_interactive(scenario_session, scripted(["r 0 0"]), output.append)

        assert state == GameState.LOST
        assert output[0] == HELP_TEXT
        assert "Game Over! Try again!" in output[-2]
        assert output[-1] == "You lost in 0 seconds."

    def test_winning_game(self, scenario_session: GameSession) -> None:
        output: List[str] = []
        state = run_interactive(
            scenario_session, scripted(["r 0 4", "r 2 0"]), output.append
        )
        assert state == GameState.WON
        assert output[-1] == "You won in 0 seconds."

    def test_bad_input_is_reported_and_play_continues(
        self, scenario_session: GameSession
    ) -> None:
        output: List[str] = []
        state = run_interactive(
            scenario_session,
            scripted(["x", "d extreme", "r 9 9", "f 0 0", "r 0 0"]),
            output.append,
        )
        assert state == GameState.WAITING
        assert any(line.startswith("Unknown command") for line in output)
        assert any(line.startswith("Unknown difficulty") for line in output)
        assert scenario_session.cell_view(0, 0).is_flagged is True

    def test_quit_stops_reading(self, scenario_session: GameSession) -> None:
        state = run_interactive(
            scenario_session, scripted(["q", "r 0 0"]), lambda text: None
        )
        assert state == GameState.WAITING

    def test_difficulty_and_new_game(self, session: GameSession) -> None:
        output: List[str] = []
        run_interactive(session, scripted(["d medium", "f 1 1", "n", "?"]), output.append)
        assert session.difficulty.name == "medium"
        assert session.board.flagged_count == 0
        assert output[-1] == HELP_TEXT

    def test_renderer_detached_after_loop(self, session: GameSession) -> None:
        output: List[str] = []
        run_interactive(session, scripted([]), output.append)
        count = len(output)
        session.reveal(0, 0)
        assert len(output) == count
