"""
Editor listener: remembers default-variant choices the player makes.

Registers for the host's "default variant changed" notification while an
editor session is live and forwards each choice to the preference store.
"""

from typing import Optional

from world.variant_persist.core import AvailablePart, PartVariant
from world.variant_persist.events import HostEvent
from world.variant_persist.log import get_logger
from world.variant_persist.scenario import VariantPreferenceStore

_logger = get_logger("behavior")


class VariantPreferenceListener:
    """
    Forwards default-variant changes from a host event to a store.

    Use as a context manager to guarantee deregistration:

        with VariantPreferenceListener(store, events.on_editor_default_variant_changed):
            ...
    """

    def __init__(self, store: VariantPreferenceStore, event: HostEvent):
        self.store = store
        self.event = event
        self._registered = False

    @property
    def registered(self) -> bool:
        return self._registered

    def activate(self) -> None:
        if self._registered:
            return
        _logger.info("Registering events")
        self.event.add(self.on_default_variant_changed)
        self._registered = True

    def deactivate(self) -> None:
        if not self._registered:
            return
        _logger.info("Unregistering events")
        self.event.remove(self.on_default_variant_changed)
        self._registered = False

    def __enter__(self) -> "VariantPreferenceListener":
        self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deactivate()

    def on_default_variant_changed(
        self,
        part: AvailablePart,
        variant: Optional[PartVariant] = None,
    ) -> None:
        """Here when the player changes the default variant for a part."""
        if variant is None:
            variant = part.variant
        if variant is None:
            _logger.debug("Default variant changed for %s without a variant; ignoring", part.name)
            return
        self.store.record(part.name, variant.name)
