"""
Test helpers for building host-side part data and save sections.
"""

from typing import Dict, List, Optional

from world.variant_persist.config_node import ConfigNode
from world.variant_persist.core import AvailablePart, PartCatalog, PartVariant


def make_part(name: str, variant_names: List[str], selected: Optional[str] = None) -> AvailablePart:
    """
    Build a part with the given variants.

    Args:
        name: Part name
        variant_names: Variant names, in order
        selected: Name of the initially selected variant; defaults to the first
    """
    variants = [PartVariant(v) for v in variant_names]
    part = AvailablePart(name=name, variants=variants)
    if selected is not None:
        part.variant = part.find_variant(selected)
    elif variants:
        part.variant = variants[0]
    return part


def make_catalog(parts: Dict[str, List[str]]) -> PartCatalog:
    """Build a catalog from {part name: [variant names]}."""
    return PartCatalog([make_part(name, variants) for name, variants in parts.items()])


def make_section(
    preferences: Dict[str, str],
    scenario_name: str = "VariantPersistScenario",
    prefix: str = "part:",
) -> ConfigNode:
    """Build the add-on's save section as the host would hand it over."""
    node = ConfigNode("SCENARIO")
    node.add_value("name", scenario_name)
    node.add_value("scene", "6")
    for part_name, variant_name in preferences.items():
        node.add_value(prefix + part_name, variant_name)
    return node
