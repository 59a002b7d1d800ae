"""
Variant Persist - remembered default part variants for the editor

Remembers the default variant the player picks for each part type and
re-applies it whenever parts are loaded into the editor.
"""

from world.variant_persist.core import (
    PartVariant,
    AvailablePart,
    PartCatalog,
)
from world.variant_persist.config_node import (
    ConfigNode,
    ConfigNodeError,
    parse_config_node,
    write_config_node,
)
from world.variant_persist.events import HostEvent, GameEvents
from world.variant_persist.scenario import LoadReport, VariantPreferenceStore
from world.variant_persist.behavior import VariantPreferenceListener
from world.variant_persist.addon import VariantPersistAddon
from world.variant_persist.persistence import load_store_from_file, save_store_to_file

__all__ = [
    # Host data structures
    "PartVariant",
    "AvailablePart",
    "PartCatalog",
    # Save-file codec
    "ConfigNode",
    "ConfigNodeError",
    "parse_config_node",
    "write_config_node",
    # Events
    "HostEvent",
    "GameEvents",
    # Store and listener
    "LoadReport",
    "VariantPreferenceStore",
    "VariantPreferenceListener",
    "VariantPersistAddon",
    # Persistence
    "load_store_from_file",
    "save_store_to_file",
]
