"""
Admin commands for default-variant debugging.

These are not full host console commands, but the logic that would
be called by command handlers.
"""

from world.variant_persist.core import PartCatalog
from world.variant_persist.scenario import VariantPreferenceStore


def cmd_variant_list(store: VariantPreferenceStore) -> str:
    """
    Admin command: variants/list

    Returns:
        One line per stored default variant
    """
    output = [f"Stored default variants: {len(store)}"]
    if not len(store):
        output.append("  (no default variants stored)")
        return "\n".join(output)

    for part_name, variant_name in store.as_dict().items():
        output.append(f"  {part_name} = {variant_name}")
    return "\n".join(output)


def cmd_variant_inspect(store: VariantPreferenceStore, catalog: PartCatalog) -> str:
    """
    Admin command: variants/inspect

    Show, for each stored preference, whether it still resolves against
    the loaded parts and whether the part currently uses it.

    Args:
        store: Preference store to inspect
        catalog: Loaded parts

    Returns:
        Formatted string for admin display
    """
    output = ["Default Variant Inspection:"]
    if not len(store):
        output.append("  (no default variants stored)")
        return "\n".join(output)

    for part_name, variant_name in store.as_dict().items():
        part = catalog.find_part(part_name)
        if part is None:
            status = "MISSING PART"
        elif part.find_variant(variant_name) is None:
            status = "MISSING VARIANT"
        elif part.variant is not None and part.variant.name == variant_name:
            status = "applied"
        else:
            current = part.variant.name if part.variant is not None else "none"
            status = f"not applied (current: {current})"
        output.append(f"  {part_name} = {variant_name} [{status}]")

    output.append("")
    output.append(f"Loaded parts: {len(catalog)}")
    return "\n".join(output)


def cmd_variant_forget(store: VariantPreferenceStore, part_name: str) -> str:
    """
    Admin command: variants/forget <part>

    Returns:
        Confirmation message
    """
    variant_name = store.get(part_name)
    if not store.remove(part_name):
        return f"No default variant stored for {part_name}."
    return f"Forgot default variant for {part_name} (was {variant_name})."
