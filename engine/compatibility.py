"""Cohabitation rules between a candidate species and an enclosure's residents.

Both predicates are pure functions of the enclosure snapshot and the
candidate; neither checks biome suitability nor capacity.
"""

from config.defaults import DUAL_BIOME, HIPPO_SPECIES, MIXED_SPECIES_EXTRA_SPACE
from config.logging_config import get_logger
from engine.catalog import SpeciesCatalog
from models.enclosure import Enclosure
from models.species import Species

logger = get_logger(__name__)


def _is_carnivore(species_id: str, catalog: SpeciesCatalog) -> bool:
    species = catalog.lookup(species_id)
    return species is not None and species.is_carnivore


def is_compatible(
    enclosure: Enclosure,
    species: Species,
    count: int,
    catalog: SpeciesCatalog,
) -> bool:
    """Whether `count` individuals of `species` may live with the current residents.

    Carnivores only share with their own species. Hippos only share the
    dual-biome enclosure, whoever the other residents are.
    """
    for occupant in enclosure.occupants:
        same_species = occupant.species_id == species.species_id

        if (species.is_carnivore or _is_carnivore(occupant.species_id, catalog)) and not same_species:
            logger.debug(
                "Enclosure %s: %s cannot share with %s (carnivore)",
                enclosure.enclosure_id, species.species_id, occupant.species_id,
            )
            return False

        if HIPPO_SPECIES in (species.species_id, occupant.species_id) and not enclosure.is_dual_biome:
            logger.debug(
                "Enclosure %s (%s): hippos only share a '%s' enclosure",
                enclosure.enclosure_id, enclosure.biome, DUAL_BIOME,
            )
            return False

    return True


def extra_space(enclosure: Enclosure, species_id: str) -> int:
    """Space reserved when a new species joins an occupied enclosure."""
    if enclosure.is_empty:
        return 0
    if species_id in enclosure.resident_species:
        return 0
    return MIXED_SPECIES_EXTRA_SPACE
