"""
Editor session wiring.

Ties the preference store and the listener to the host's scene lifecycle:
entering an editor scene loads the store from the save section and starts
listening; leaving it stops listening.
"""

from typing import Optional

from world.variant_persist.behavior import VariantPreferenceListener
from world.variant_persist.config import VariantPersistConfig, get_config
from world.variant_persist.config_node import ConfigNode
from world.variant_persist.core import PartCatalog
from world.variant_persist.events import GameEvents
from world.variant_persist.log import get_logger
from world.variant_persist.scenario import LoadReport, VariantPreferenceStore

_logger = get_logger("addon")


class VariantPersistAddon:
    def __init__(
        self,
        catalog: PartCatalog,
        events: GameEvents,
        store: Optional[VariantPreferenceStore] = None,
        config: Optional[VariantPersistConfig] = None,
    ):
        self.catalog = catalog
        self.events = events
        self._config = config
        self.store = store if store is not None else VariantPreferenceStore(config)
        self.listener = VariantPreferenceListener(
            self.store, events.on_editor_default_variant_changed
        )
        self._scene: Optional[str] = None

    @property
    def config(self) -> VariantPersistConfig:
        return self._config if self._config is not None else get_config()

    @property
    def active(self) -> bool:
        return self._scene is not None

    def on_scene_enter(self, scene: str, node: Optional[ConfigNode] = None) -> Optional[LoadReport]:
        """
        Start an editor session if scene is an editor scene.

        Args:
            scene: Host scene name
            node: The add-on's save-file section; None for a save without one

        Returns:
            LoadReport, or None if scene is not an editor scene
        """
        if scene not in self.config.editor_scenes:
            _logger.debug("Scene %s is not an editor scene; staying inactive", scene)
            return None

        if self.active:
            self.on_scene_exit()

        if node is None:
            node = ConfigNode("SCENARIO")
        report = self.store.load(node, self.catalog)
        self.listener.activate()
        self._scene = scene
        return report

    def on_game_save(self, node: ConfigNode) -> bool:
        """Write the store into node if an editor session is live."""
        if not self.active:
            return False
        self.store.save(node)
        return True

    def on_scene_exit(self) -> None:
        self.listener.deactivate()
        self._scene = None
