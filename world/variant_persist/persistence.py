"""
Persistence of the preference store inside a save file on disk.

The add-on owns one SCENARIO section of the save file, identified by its
"name" value. Everything else in the file belongs to the host and is
written back untouched.
"""

from pathlib import Path
from typing import Optional, Union

from world.variant_persist.config_node import ConfigNode, parse_config_node, write_config_node
from world.variant_persist.core import PartCatalog
from world.variant_persist.log import get_logger
from world.variant_persist.scenario import LoadReport, VariantPreferenceStore

_logger = get_logger("persistence")

SCENARIO_NODE = "SCENARIO"
GAME_NODE = "GAME"


def find_scenario_node(root: ConfigNode, scenario_name: str) -> Optional[ConfigNode]:
    """
    Find the SCENARIO section called scenario_name anywhere under root.

    Returns:
        The section, or None if the save has none
    """
    for node in root.nodes:
        if node.name == SCENARIO_NODE and node.get_value("name") == scenario_name:
            return node
        found = find_scenario_node(node, scenario_name)
        if found is not None:
            return found
    return None


def read_save_file(path: Union[str, Path]) -> ConfigNode:
    """Parse a save file; a missing file reads as an empty root."""
    save_path = Path(path)
    if not save_path.exists():
        return ConfigNode("")
    with open(save_path, "r", encoding="utf-8") as f:
        return parse_config_node(f.read())


def write_save_file(root: ConfigNode, path: Union[str, Path]) -> None:
    """Write a save file atomically (write to temp, then rename)."""
    save_path = Path(path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    temp_file = save_path.with_suffix(save_path.suffix + ".tmp")
    with open(temp_file, "w", encoding="utf-8") as f:
        f.write(write_config_node(root))

    temp_file.replace(save_path)


def load_store_from_file(
    store: VariantPreferenceStore,
    path: Union[str, Path],
    catalog: PartCatalog,
) -> LoadReport:
    """
    Load the store from the add-on's section of a save file.

    A missing file or section loads as an empty section, leaving the
    store empty.

    Args:
        store: Store to load into
        path: Save file path
        catalog: Loaded parts to apply preferences to

    Returns:
        LoadReport from the store
    """
    scenario_name = store.config.scenario_name
    root = read_save_file(path)
    node = find_scenario_node(root, scenario_name)
    if node is None:
        _logger.info("No %s section in %s; starting with no default variants", scenario_name, path)
        node = ConfigNode(SCENARIO_NODE)
    return store.load(node, catalog)


def save_store_to_file(store: VariantPreferenceStore, path: Union[str, Path]) -> None:
    """
    Write the store into the add-on's section of a save file.

    The section's own bookkeeping values are kept and its preference
    values are replaced. A missing section is created under GAME when the
    save has one, else at the top level.
    """
    config = store.config
    root = read_save_file(path)

    node = find_scenario_node(root, config.scenario_name)
    if node is None:
        parent = root.get_node(GAME_NODE) or root
        node = parent.add_node(SCENARIO_NODE)
        node.add_value("name", config.scenario_name)

    node.values = [(n, v) for n, v in node.values if not n.startswith(config.part_prefix)]
    store.save(node)

    write_save_file(root, path)
    _logger.debug("Wrote %d default variants to %s", len(store), path)
