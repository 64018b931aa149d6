"""
Game events for Minesweeper.

The game session publishes these plain data events so a presentation
layer can redraw without the game logic knowing anything about it.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List, Tuple, Type

from .board import GameState, Position
from .difficulty import Difficulty

Handler = Callable[[Any], None]


# ============================================================================
# Event Types
# ============================================================================

@dataclass(frozen=True)
class BoardReset:
    """A fresh board was created."""

    difficulty: Difficulty


@dataclass(frozen=True)
class CellsChanged:
    """Cells whose visible state changed and need redrawing."""

    cells: Tuple[Position, ...]


@dataclass(frozen=True)
class StateChanged:
    previous: GameState
    current: GameState


@dataclass(frozen=True)
class MineCountChanged:
    """Mines minus flags; may be negative."""

    remaining: int


@dataclass(frozen=True)
class TimerStarted:
    pass


@dataclass(frozen=True)
class TimerStopped:
    elapsed: int


@dataclass(frozen=True)
class TimerTick:
    elapsed: int


@dataclass(frozen=True)
class GameOver:
    won: bool
    elapsed: int


# ============================================================================
# Event Bus
# ============================================================================

class EventBus:
    """
    Synchronous publish/subscribe dispatcher.

    Handlers run in subscription order on the publishing thread.
    Exceptions raised by a handler propagate to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[type, List[Handler]] = defaultdict(list)
        self._catch_all: List[Handler] = []

    def subscribe(self, event_type: Type[Any], handler: Handler) -> Callable[[], None]:
        """
        Register a handler for one event type.

        Returns:
            Callable that removes the subscription.
        """
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Register a handler that receives every event."""
        self._catch_all.append(handler)

        def unsubscribe() -> None:
            if handler in self._catch_all:
                self._catch_all.remove(handler)

        return unsubscribe

    def publish(self, event: Any) -> None:
        """Deliver an event to its type's handlers, then catch-all ones."""
        for handler in list(self._handlers.get(type(event), ())):
            handler(event)
        for handler in list(self._catch_all):
            handler(event)
