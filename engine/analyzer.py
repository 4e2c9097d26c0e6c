"""Feasibility analysis: which enclosures can take a new group of animals."""

from typing import Iterable, Tuple

from config.defaults import (
    ERROR_INVALID_SPECIES, ERROR_INVALID_QUANTITY, ERROR_NO_VIABLE_ENCLOSURE,
)
from config.logging_config import get_logger
from data.sample_data import default_roster
from engine.catalog import SpeciesCatalog, default_catalog
from engine.compatibility import extra_space, is_compatible
from engine.occupancy import free_space
from models.analysis import AnalysisResult, EnclosureEvaluation, ViableEnclosure
from models.enclosure import Enclosure
from models.species import Species

logger = get_logger(__name__)


def _is_valid_quantity(count) -> bool:
    # bool is an int subclass but never a quantity
    if isinstance(count, bool) or not isinstance(count, int):
        return False
    return count > 0


def evaluate_enclosure(
    enclosure: Enclosure,
    species: Species,
    count: int,
    catalog: SpeciesCatalog,
) -> EnclosureEvaluation:
    """Run biome, capacity and cohabitation checks for one enclosure."""
    evaluation = EnclosureEvaluation(
        enclosure_id=enclosure.enclosure_id,
        biome=enclosure.biome,
        total_capacity=enclosure.total_capacity,
        biome_match=species.lives_in(enclosure.biome_tags),
        free_space=free_space(enclosure),
        required_space=species.space_for(count),
        extra_space=extra_space(enclosure, species.species_id),
        compatible=is_compatible(enclosure, species, count, catalog),
    )
    logger.debug(
        "Enclosure %s: biome=%s free=%s required=%s extra=%s compatible=%s -> %s",
        enclosure.enclosure_id, evaluation.biome_match, evaluation.free_space,
        evaluation.required_space, evaluation.extra_space, evaluation.compatible,
        "viable" if evaluation.qualifies else "rejected",
    )
    return evaluation


def analyze(
    species_id: str,
    count: int,
    enclosures: Iterable[Enclosure],
    catalog: SpeciesCatalog,
) -> AnalysisResult:
    """Find every enclosure that can legally house `count` animals of `species_id`.

    Species is validated before quantity. Viable enclosures are returned in
    ascending id order; an empty set is reported as an error.
    """
    species = catalog.lookup(species_id) if isinstance(species_id, str) else None
    if species is None:
        logger.info("Rejected analysis: unknown species %r", species_id)
        return AnalysisResult(species_id, count, error=ERROR_INVALID_SPECIES)

    if not _is_valid_quantity(count):
        logger.info("Rejected analysis: invalid quantity %r for %s", count, species_id)
        return AnalysisResult(species_id, count, error=ERROR_INVALID_QUANTITY)

    evaluations = [evaluate_enclosure(e, species, count, catalog) for e in enclosures]

    viable = [
        ViableEnclosure(ev.enclosure_id, ev.remaining_space, ev.total_capacity)
        for ev in evaluations if ev.qualifies
    ]
    viable.sort(key=lambda v: v.enclosure_id)

    if not viable:
        logger.info("No viable enclosure for %d x %s", count, species_id)
        return AnalysisResult(
            species_id, count, error=ERROR_NO_VIABLE_ENCLOSURE, evaluations=evaluations,
        )

    logger.info(
        "%d x %s fits in enclosures %s",
        count, species_id, ", ".join(str(v.enclosure_id) for v in viable),
    )
    return AnalysisResult(species_id, count, viable=viable, evaluations=evaluations)


class FeasibilityAnalyzer:
    """Binds a species catalog to an enclosure roster snapshot.

    The roster is copied into a tuple on construction and never written to,
    so one analyzer can serve concurrent queries.
    """

    def __init__(self, catalog: SpeciesCatalog, enclosures: Iterable[Enclosure]):
        self.catalog = catalog
        self.enclosures: Tuple[Enclosure, ...] = tuple(enclosures)

    def analyze(self, species_id: str, count: int) -> AnalysisResult:
        return analyze(species_id, count, self.enclosures, self.catalog)


def default_analyzer() -> FeasibilityAnalyzer:
    """Analyzer over the default catalog and the zoo's current roster."""
    return FeasibilityAnalyzer(default_catalog(), default_roster())
