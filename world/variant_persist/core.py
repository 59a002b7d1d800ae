"""
Core data structures for the variant persistence add-on.

These mirror the slice of the host's part data the add-on touches:
the loaded parts list, each part's variants, and its selected default.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class PartVariant:
    """A named cosmetic/functional configuration of a part."""
    name: str


@dataclass
class AvailablePart:
    """
    A buildable part type as loaded by the host.

    `variant` is the default variant the editor uses when the part is
    placed; None until the host or the player picks one.
    """
    name: str
    variants: List[PartVariant] = field(default_factory=list)
    variant: Optional[PartVariant] = None

    def find_variant(self, variant_name: str) -> Optional[PartVariant]:
        """Return the variant called variant_name, or None."""
        for variant in self.variants:
            if variant.name == variant_name:
                return variant
        return None


@dataclass
class PartCatalog:
    """The host's list of loaded parts."""
    parts: List[AvailablePart] = field(default_factory=list)

    def find_part(self, part_name: str) -> Optional[AvailablePart]:
        """Return the first loaded part called part_name, or None."""
        for part in self.parts:
            if part.name == part_name:
                return part
        return None

    def __iter__(self) -> Iterator[AvailablePart]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)
