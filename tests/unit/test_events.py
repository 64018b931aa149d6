"""
Unit tests for the event bus.
"""
import pytest
from minesweeper import CellsChanged, EventBus, MineCountChanged, TimerStarted


class TestEventBus:
    """Test publish/subscribe delivery."""

    def test_typed_subscription_only_sees_its_type(self) -> None:
        bus = EventBus()
        seen = []
        bus.subscribe(MineCountChanged, seen.append)

        bus.publish(TimerStarted())
        bus.publish(MineCountChanged(3))

        assert seen == [MineCountChanged(3)]

    def test_handlers_run_in_subscription_order(self) -> None:
        bus = EventBus()
        order = []
        bus.subscribe(TimerStarted, lambda event: order.append("typed"))
        bus.subscribe_all(lambda event: order.append("all"))
        bus.subscribe(TimerStarted, lambda event: order.append("typed-2"))

        bus.publish(TimerStarted())

        assert order == ["typed", "typed-2", "all"]

    def test_unsubscribe_stops_delivery(self) -> None:
        bus = EventBus()
        seen = []
        unsubscribe = bus.subscribe(CellsChanged, seen.append)
        unsubscribe_all = bus.subscribe_all(seen.append)

        unsubscribe()
        unsubscribe_all()
        unsubscribe()
        bus.publish(CellsChanged(((0, 0),)))

        assert seen == []

    def test_handler_errors_propagate(self) -> None:
        bus = EventBus()

        def broken(event):
            raise RuntimeError("redraw failed")

        bus.subscribe(TimerStarted, broken)
        with pytest.raises(RuntimeError, match="redraw failed"):
            bus.publish(TimerStarted())
