from dataclasses import dataclass
from typing import FrozenSet, Tuple

from config.defaults import COMPOUND_BIOME_SEPARATOR, DUAL_BIOME


def split_biome(descriptor: str) -> FrozenSet[str]:
    """Decompose a biome descriptor into its tags ("savana e rio" -> {"savana", "rio"})."""
    parts = (p.strip() for p in descriptor.split(COMPOUND_BIOME_SEPARATOR))
    return frozenset(p for p in parts if p)


@dataclass(frozen=True)
class Occupant:
    species_id: str
    count: int
    unit_size: int

    @property
    def space(self) -> int:
        return self.count * self.unit_size


@dataclass(frozen=True)
class Enclosure:
    enclosure_id: int
    biome: str                          # Descriptor as written, e.g. "savana e rio"
    total_capacity: int
    occupants: Tuple[Occupant, ...] = ()

    def __post_init__(self):
        # Accept lists from loaders but store an immutable snapshot
        object.__setattr__(self, "occupants", tuple(self.occupants))
        object.__setattr__(self, "_biome_tags", split_biome(self.biome))

    @property
    def biome_tags(self) -> FrozenSet[str]:
        return self._biome_tags

    @property
    def is_dual_biome(self) -> bool:
        return self.biome == DUAL_BIOME

    @property
    def is_empty(self) -> bool:
        return len(self.occupants) == 0

    @property
    def resident_species(self) -> Tuple[str, ...]:
        return tuple(o.species_id for o in self.occupants)
