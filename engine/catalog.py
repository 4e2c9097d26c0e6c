"""Static species catalog: unit size, biomes and diet of every accepted species."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from models.species import Species


class SpeciesCatalog:
    """Read-only lookup of accepted species keyed by species id."""

    def __init__(self, species: Iterable[Species]):
        table: Dict[str, Species] = {}
        for s in species:
            if s.species_id in table:
                raise ValueError(f"Duplicate species in catalog: {s.species_id}")
            table[s.species_id] = s
        self._table = MappingProxyType(table)

    def lookup(self, species_id: str) -> Optional[Species]:
        return self._table.get(species_id)

    @property
    def species_ids(self) -> List[str]:
        return list(self._table.keys())

    def __contains__(self, species_id) -> bool:
        return species_id in self._table

    def __iter__(self) -> Iterator[Species]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)


DEFAULT_SPECIES = (
    Species("LEAO", 3, frozenset({"savana"}), is_carnivore=True),
    Species("LEOPARDO", 2, frozenset({"savana"}), is_carnivore=True),
    Species("CROCODILO", 3, frozenset({"rio"}), is_carnivore=True),
    Species("MACACO", 1, frozenset({"savana", "floresta"})),
    Species("GAZELA", 2, frozenset({"savana"})),
    Species("HIPOPOTAMO", 4, frozenset({"savana", "rio"})),
)


def default_catalog() -> SpeciesCatalog:
    """Build the catalog of species the zoo accepts."""
    return SpeciesCatalog(DEFAULT_SPECIES)
