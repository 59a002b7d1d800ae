"""
Preference store: the player's default variant per part type.

Loaded from and saved to the add-on's section of the save file. On load,
each stored preference is applied to the matching loaded part; preferences
whose part or variant no longer exists are dropped so they don't come
back on the next save.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from world.variant_persist.config import VariantPersistConfig, get_config
from world.variant_persist.config_node import ConfigNode, ConfigNodeError, check_value
from world.variant_persist.core import AvailablePart, PartCatalog
from world.variant_persist.log import get_logger

_logger = get_logger("scenario")


@dataclass
class LoadReport:
    """What a load did with the stored preferences."""
    # Distinct part ids read; a part listed twice counts once
    loaded: int = 0
    applied: List[str] = field(default_factory=list)
    missing_parts: List[str] = field(default_factory=list)
    missing_variants: List[str] = field(default_factory=list)

    @property
    def pruned(self) -> List[str]:
        return self.missing_parts + self.missing_variants


class VariantPreferenceStore:
    """
    Mapping of part name -> preferred default variant name.

    At most one preference per part; insertion order is kept so saves
    are deterministic.
    """

    def __init__(self, config: Optional[VariantPersistConfig] = None):
        self._config = config
        self._default_variants: Dict[str, str] = {}

    @property
    def config(self) -> VariantPersistConfig:
        return self._config if self._config is not None else get_config()

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def record(self, part_name: str, variant_name: str) -> bool:
        """
        Remember variant_name as the default for part_name.

        Names the save file cannot hold are skipped with a warning.

        Returns:
            True if the preference was stored
        """
        try:
            check_value(self.config.part_prefix + part_name, variant_name)
        except ConfigNodeError as e:
            _logger.warning("Not remembering default variant for %r: %s", part_name, e)
            return False
        _logger.info("Setting default variant: %s = %s", part_name, variant_name)
        self._default_variants[part_name] = variant_name
        return True

    def select_default_variant(self, part: AvailablePart) -> None:
        """Remember a part's currently selected default variant."""
        if part.variant is None:
            _logger.debug("Part %s has no selected variant; nothing to remember", part.name)
            return
        self.record(part.name, part.variant.name)

    def remove(self, part_name: str) -> bool:
        """Forget the preference for part_name. Returns True if one was stored."""
        variant_name = self._default_variants.pop(part_name, None)
        if variant_name is None:
            return False
        _logger.info('Unsetting default variant for part: %s (was "%s")', part_name, variant_name)
        return True

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def get(self, part_name: str) -> Optional[str]:
        return self._default_variants.get(part_name)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._default_variants)

    def __contains__(self, part_name: object) -> bool:
        return part_name in self._default_variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._default_variants)

    def __len__(self) -> int:
        return len(self._default_variants)

    # -------------------------------------------------------------------------
    # Save-file section
    # -------------------------------------------------------------------------

    def load(self, node: ConfigNode, catalog: PartCatalog) -> LoadReport:
        """
        Replace the stored preferences with those in node, then apply them.

        Only values named "<part_prefix><part name>" are preferences; the
        host's own bookkeeping values in the section are skipped.

        Args:
            node: The add-on's save-file section
            catalog: Loaded parts to apply preferences to

        Returns:
            LoadReport of applied and pruned entries
        """
        prefix = self.config.part_prefix
        self._default_variants = {}
        report = LoadReport()

        for name, value in node.values:
            if not name.startswith(prefix):
                continue
            part_name = name[len(prefix):]
            _logger.debug("Loading default variant: %s = %s", part_name, value)
            if part_name in self._default_variants:
                _logger.warning(
                    'Duplicate default variant for part "%s"; using "%s" over "%s"',
                    part_name, value, self._default_variants[part_name],
                )
            self._default_variants[part_name] = value

        report.loaded = len(self._default_variants)
        self._initialize_parts(catalog, report)
        return report

    def save(self, node: ConfigNode) -> None:
        """Append one value per stored preference to node."""
        prefix = self.config.part_prefix
        _logger.info("Saving %d default variants", len(self._default_variants))
        for part_name, variant_name in self._default_variants.items():
            _logger.debug("Saving default variant: %s = %s", part_name, variant_name)
            node.add_value(prefix + part_name, variant_name)

    def _initialize_parts(self, catalog: PartCatalog, report: LoadReport) -> None:
        """Set each stored preference on its loaded part, pruning ones that no longer resolve."""
        # Iterate a snapshot; pruning mutates the mapping
        for part_name, variant_name in list(self._default_variants.items()):
            part = catalog.find_part(part_name)
            if part is None:
                # e.g. the mod providing the part was uninstalled
                _logger.warning(
                    'No such part "%s" found. Removing default variant setting for it.',
                    part_name,
                )
                self.remove(part_name)
                report.missing_parts.append(part_name)
                continue

            variant = part.find_variant(variant_name)
            if variant is None:
                # e.g. the mod was updated and renamed or dropped the variant
                _logger.warning(
                    'No such variant "%s" exists for part "%s". '
                    "Removing default variant setting for it.",
                    variant_name, part_name,
                )
                self.remove(part_name)
                report.missing_variants.append(part_name)
                continue

            part.variant = variant
            report.applied.append(part_name)

        _logger.info("Finished setting default variants for %d parts.", len(report.applied))
