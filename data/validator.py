"""Schema validation for uploaded data files."""

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from config.defaults import BIOMES
from data.loader import parse_flag, split_occupant_entries, parse_biome_list
from engine.catalog import SpeciesCatalog
from models.enclosure import split_biome


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


ENCLOSURE_REQUIRED_COLUMNS = [
    "Enclosure ID",
    "Biome",
    "Total Capacity",
]

SPECIES_REQUIRED_COLUMNS = [
    "Species",
    "Unit Size",
    "Biomes",
    "Carnivore",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _integer_column(df: pd.DataFrame, column: str, file_label: str, result: ValidationResult) -> pd.Series:
    """Coerce a column to numbers, flagging blank or non-integer cells."""
    values = pd.to_numeric(df[column], errors="coerce")
    if values.isna().any():
        result.is_valid = False
        result.errors.append(f"{file_label}: {column} has blank or non-numeric values.")
    fractional = values.notna() & (values % 1 != 0)
    if fractional.any():
        result.is_valid = False
        result.errors.append(f"{file_label}: {column} must be a whole number.")
    return values


def _unknown_biomes(tags) -> List[str]:
    return sorted(t for t in tags if t not in BIOMES)


def validate_species(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, SPECIES_REQUIRED_COLUMNS, "Species")
    if not result.is_valid:
        return result

    unit_size = _integer_column(df, "Unit Size", "Species", result)
    if (unit_size <= 0).any():
        result.is_valid = False
        result.errors.append("Species: Unit Size must be positive.")

    names = df["Species"].astype(str).str.strip().str.upper()
    dupes = names.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Species: Duplicate species: {names[dupes].unique().tolist()}")

    for _, row in df.iterrows():
        try:
            parse_flag(row["Carnivore"])
        except ValueError as e:
            result.is_valid = False
            result.errors.append(f"Species: {row['Species']}: {e}")

        biomes = parse_biome_list(row["Biomes"])
        if not biomes:
            result.is_valid = False
            result.errors.append(f"Species: {row['Species']} has no biomes.")
        unknown = _unknown_biomes(biomes)
        if unknown:
            result.warnings.append(f"Species: {row['Species']} lists unknown biomes: {', '.join(unknown)}")

    return result


def validate_enclosures(df: pd.DataFrame, catalog: SpeciesCatalog) -> ValidationResult:
    result = _check_required_columns(df, ENCLOSURE_REQUIRED_COLUMNS, "Enclosures")
    if not result.is_valid:
        return result

    _integer_column(df, "Enclosure ID", "Enclosures", result)
    capacity = _integer_column(df, "Total Capacity", "Enclosures", result)
    if (capacity <= 0).any():
        result.is_valid = False
        result.errors.append("Enclosures: Total Capacity must be positive.")

    dupes = df.duplicated(subset=["Enclosure ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Enclosures: Duplicate enclosure ids: {df[dupes]['Enclosure ID'].unique().tolist()}"
        )

    has_occupants = "Occupants" in df.columns
    for idx, row in df.iterrows():
        label = f"Enclosures: Recinto {row['Enclosure ID']}"

        unknown = _unknown_biomes(split_biome(str(row["Biome"]).strip().lower()))
        if unknown:
            result.warnings.append(f"{label}: unknown biome tags: {', '.join(unknown)}")

        if not has_occupants:
            continue
        try:
            entries = split_occupant_entries(row["Occupants"])
        except ValueError as e:
            result.is_valid = False
            result.errors.append(f"{label}: {e}")
            continue

        used = 0
        for species_id, count in entries:
            species = catalog.lookup(species_id)
            if species is None:
                result.is_valid = False
                result.errors.append(f"{label}: unknown species '{species_id}'.")
                continue
            used += species.space_for(count)

        if pd.notna(capacity.loc[idx]) and used > capacity.loc[idx]:
            result.is_valid = False
            result.errors.append(
                f"{label}: occupants use {used} but capacity is {row['Total Capacity']}."
            )

    return result
