"""
Host event registration.

A HostEvent is one named notification the host emits; subscribers
register a callable and are called with the event's positional arguments.
GameEvents groups the events the add-on listens to.
"""

from typing import Any, Callable, List

from world.variant_persist.log import get_logger

_logger = get_logger("events")


class HostEvent:
    def __init__(self, name: str):
        self.name = name
        self._callbacks: List[Callable[..., Any]] = []

    def add(self, callback: Callable[..., Any]) -> None:
        """Register callback. Registering the same callback twice keeps one entry."""
        if callback in self._callbacks:
            return
        self._callbacks.append(callback)
        _logger.debug("Subscribed %s to %s", callback, self.name)

    def remove(self, callback: Callable[..., Any]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)
            _logger.debug("Unsubscribed %s from %s", callback, self.name)

    def fire(self, *args: Any) -> None:
        # Snapshot so callbacks may unsubscribe while being notified
        for callback in list(self._callbacks):
            try:
                callback(*args)
            except Exception:
                _logger.exception("Error dispatching event %s to %s", self.name, callback)

    def __contains__(self, callback: Callable[..., Any]) -> bool:
        return callback in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"HostEvent({self.name!r}, subscribers={len(self._callbacks)})"


class GameEvents:
    """Host events used by the add-on."""

    def __init__(self):
        # Fired with (part, variant) when the player picks a part's default variant
        self.on_editor_default_variant_changed = HostEvent("onEditorDefaultVariantChanged")
