from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class Species:
    species_id: str
    unit_size: int                 # Space taken by a single individual
    biomes: FrozenSet[str]         # e.g. frozenset({"savana", "rio"})
    is_carnivore: bool = False

    def space_for(self, count: int) -> int:
        """Space required to house `count` individuals."""
        return self.unit_size * count

    def lives_in(self, biome_tags: FrozenSet[str]) -> bool:
        return not self.biomes.isdisjoint(biome_tags)
