"""
Interactive terminal play for Minesweeper.

Reads text commands, applies them to a GameSession and lets a
TerminalRenderer redraw the board.
"""
from dataclasses import dataclass
from typing import Callable

from .board import GameState
from .render import TerminalRenderer
from .session import GameSession


HELP_TEXT = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   toggle a flag
  n           new game
  d NAME      switch difficulty (easy, medium, hard)
  ?           show this help
  q           quit"""


# ============================================================================
# Command Parsing
# ============================================================================

@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        action: One of reveal, flag, new, difficulty, help, quit.
        row: Target row for reveal/flag.
        col: Target column for reveal/flag.
        argument: Difficulty name for the difficulty action.
    """

    action: str
    row: int = 0
    col: int = 0
    argument: str = ""


_CELL_ACTIONS = {"r": "reveal", "reveal": "reveal", "f": "flag", "flag": "flag"}
_SIMPLE_ACTIONS = {
    "n": "new", "new": "new",
    "q": "quit", "quit": "quit", "exit": "quit",
    "?": "help", "h": "help", "help": "help",
}


def parse_command(line: str) -> Command:
    """
    Parse one input line into a Command.

    Raises:
        ValueError: If the line is not a valid command.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command (type ? for help)")

    keyword = parts[0].lower()
    if keyword in _CELL_ACTIONS:
        if len(parts) != 3:
            raise ValueError(f"Usage: {keyword} ROW COL")
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            raise ValueError("ROW and COL must be integers") from None
        return Command(_CELL_ACTIONS[keyword], row, col)

    if keyword in ("d", "difficulty"):
        if len(parts) != 2:
            raise ValueError(f"Usage: {keyword} NAME")
        return Command("difficulty", argument=parts[1])

    if keyword in _SIMPLE_ACTIONS and len(parts) == 1:
        return Command(_SIMPLE_ACTIONS[keyword])

    raise ValueError(f"Unknown command: {line.strip()!r} (type ? for help)")


# ============================================================================
# Interactive Loop
# ============================================================================

def run_interactive(
    session: GameSession,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> GameState:
    """
    Play a session from text commands until quit or end of input.

    Out-of-bounds cells and moves the game does not accept are simply
    ignored, the board is not redrawn for them.

    Args:
        session: Session to drive.
        read: Returns the next input line; raises EOFError at the end.
        write: Receives output text.

    Returns:
        The session's game state when play stopped.
    """
    renderer = TerminalRenderer(session, write)
    write(HELP_TEXT)
    renderer.draw()

    try:
        while True:
            try:
                line = read()
            except EOFError:
                break
            session.tick()

            try:
                command = parse_command(line)
            except ValueError as exc:
                write(str(exc))
                continue

            if command.action == "quit":
                break
            if command.action == "help":
                write(HELP_TEXT)
            elif command.action == "reveal":
                session.reveal(command.row, command.col)
            elif command.action == "flag":
                session.toggle_flag(command.row, command.col)
            elif command.action == "new":
                session.new_game()
            elif command.action == "difficulty":
                try:
                    session.create(command.argument)
                except ValueError as exc:
                    write(str(exc))
    finally:
        renderer.close()

    return session.state
