"""Generates human-readable explanations for feasibility analyses."""

from typing import List

from config.defaults import DUAL_BIOME
from models.analysis import AnalysisResult, EnclosureEvaluation, ViableEnclosure


def format_viable(viable: ViableEnclosure) -> str:
    return viable.label


def format_result(result: AnalysisResult) -> List[str]:
    """Display lines for a result: the viable enclosures, or the error message."""
    if result.ok:
        return [format_viable(v) for v in result.viable]
    return [result.message]


def explain_enclosure(evaluation: EnclosureEvaluation, species_id: str, count: int) -> List[str]:
    """Produce step-by-step explanation for one enclosure's verdict."""
    steps = []

    if evaluation.biome_match:
        steps.append(f"Biome: '{evaluation.biome}' suits {species_id}")
    else:
        steps.append(f"Biome: '{evaluation.biome}' does not suit {species_id}")

    needed = evaluation.required_space + evaluation.extra_space
    space_step = (
        f"Space: {count} x {species_id} needs {evaluation.required_space}"
    )
    if evaluation.extra_space:
        space_step += f" + {evaluation.extra_space} (mixed species) = {needed}"
    space_step += f"; {evaluation.free_space} of {evaluation.total_capacity} free"
    if not evaluation.fits:
        space_step += " => not enough room"
    steps.append(space_step)

    if evaluation.compatible:
        steps.append("Cohabitation: current residents accept the newcomers")
    else:
        steps.append(
            "Cohabitation: rejected (carnivores only live with their own species; "
            f"hippos only share a '{DUAL_BIOME}' enclosure)"
        )

    if evaluation.qualifies:
        steps.append(f"Verdict: viable, {evaluation.remaining_space} free after the addition")
    else:
        steps.append("Verdict: not viable")

    return steps


def explain_result(result: AnalysisResult) -> List[str]:
    """Summarise an analysis, one block per enclosure examined."""
    if not result.evaluations:
        return [result.message]

    lines = []
    for ev in result.evaluations:
        lines.append(f"Recinto {ev.enclosure_id}:")
        lines.extend(f"  {step}" for step in explain_enclosure(ev, result.species_id, result.count))
    if not result.ok:
        lines.append(result.message)
    return lines
