from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import ERROR_MESSAGES, VIABLE_ENCLOSURE_TEMPLATE


@dataclass(frozen=True)
class ViableEnclosure:
    enclosure_id: int
    free_space: int          # Remaining after the hypothetical addition
    total_capacity: int

    @property
    def label(self) -> str:
        return VIABLE_ENCLOSURE_TEMPLATE.format(
            enclosure_id=self.enclosure_id,
            free_space=self.free_space,
            total_capacity=self.total_capacity,
        )


@dataclass(frozen=True)
class EnclosureEvaluation:
    """Outcome of every check run against one enclosure."""
    enclosure_id: int
    biome: str
    total_capacity: int
    biome_match: bool
    free_space: int          # Before the addition
    required_space: int
    extra_space: int
    compatible: bool

    @property
    def fits(self) -> bool:
        return self.free_space >= self.required_space + self.extra_space

    @property
    def qualifies(self) -> bool:
        return self.biome_match and self.fits and self.compatible

    @property
    def remaining_space(self) -> int:
        return self.free_space - self.required_space - self.extra_space


@dataclass
class AnalysisResult:
    species_id: str
    count: int
    error: Optional[str] = None              # One of the ERROR_* tags
    viable: Optional[List[ViableEnclosure]] = None
    evaluations: List[EnclosureEvaluation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        if self.error is None:
            return None
        return ERROR_MESSAGES[self.error]

    @property
    def lines(self) -> Optional[List[str]]:
        if self.viable is None:
            return None
        return [v.label for v in self.viable]
