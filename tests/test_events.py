"""
Tests for host event registration.

See world/variant_persist/events.py for implementation.
"""

import logging

from world.variant_persist.events import GameEvents, HostEvent


def test_fire_calls_callbacks_in_order():
    event = HostEvent("test")
    calls = []
    event.add(lambda x: calls.append(("a", x)))
    event.add(lambda x: calls.append(("b", x)))

    event.fire(1)

    assert calls == [("a", 1), ("b", 1)]


def test_add_same_callback_twice_registers_once():
    event = HostEvent("test")
    calls = []

    def callback():
        calls.append(1)

    event.add(callback)
    event.add(callback)
    event.fire()

    assert len(event) == 1
    assert calls == [1]


def test_remove_unregistered_callback_is_noop():
    event = HostEvent("test")

    event.remove(print)

    assert len(event) == 0


def test_failing_callback_does_not_stop_delivery(caplog):
    event = HostEvent("test")
    calls = []

    def broken(_):
        raise ValueError("boom")

    event.add(broken)
    event.add(calls.append)

    with caplog.at_level(logging.ERROR, logger="variant_persist"):
        event.fire("payload")

    assert calls == ["payload"]
    assert "Error dispatching event test" in caplog.text


def test_callback_may_unsubscribe_during_fire():
    event = HostEvent("test")
    calls = []

    def once():
        calls.append(1)
        event.remove(once)

    event.add(once)
    event.fire()
    event.fire()

    assert calls == [1]


def test_game_events_are_per_instance():
    a = GameEvents()
    b = GameEvents()

    a.on_editor_default_variant_changed.add(print)

    assert print in a.on_editor_default_variant_changed
    assert print not in b.on_editor_default_variant_changed
