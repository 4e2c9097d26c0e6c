"""File upload parsing — CSV/XLSX into typed model lists."""

from typing import List, Optional, Tuple

import pandas as pd

from config.defaults import FALSY_VALUES, TRUTHY_VALUES
from config.logging_config import get_logger
from engine.catalog import SpeciesCatalog
from models.enclosure import Enclosure, Occupant
from models.species import Species

logger = get_logger(__name__)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return bool(pd.isna(value))


def split_occupant_entries(cell) -> List[Tuple[str, int]]:
    """Parse an occupants cell like "3 MACACO; 1 GAZELA" into (species, count) pairs."""
    if _is_blank(cell):
        return []
    entries = []
    for raw in str(cell).split(";"):
        raw = raw.strip()
        if not raw:
            continue
        parts = raw.split()
        if len(parts) != 2 or not parts[0].isdigit():
            raise ValueError(f"Malformed occupant entry '{raw}'. Expected '<count> <SPECIES>'.")
        count = int(parts[0])
        if count <= 0:
            raise ValueError(f"Occupant count must be positive in '{raw}'.")
        entries.append((parts[1].upper(), count))
    return entries


def parse_occupants(cell, catalog: SpeciesCatalog) -> List[Occupant]:
    """Resolve occupant entries against the catalog to pick up unit sizes."""
    occupants = []
    for species_id, count in split_occupant_entries(cell):
        species = catalog.lookup(species_id)
        if species is None:
            raise ValueError(f"Unknown species '{species_id}' in occupants.")
        occupants.append(Occupant(species_id, count, species.unit_size))
    return occupants


def parse_enclosures(df: pd.DataFrame, catalog: SpeciesCatalog) -> List[Enclosure]:
    """Convert an enclosures DataFrame into Enclosure objects."""
    enclosures = []
    for _, row in df.iterrows():
        occupants_cell = row.get("Occupants") if "Occupants" in df.columns else None
        enclosures.append(Enclosure(
            enclosure_id=int(row["Enclosure ID"]),
            biome=str(row["Biome"]).strip().lower(),
            total_capacity=int(row["Total Capacity"]),
            occupants=parse_occupants(occupants_cell, catalog),
        ))
    logger.info("Parsed %d enclosures", len(enclosures))
    return enclosures


def parse_flag(value) -> bool:
    text = "" if _is_blank(value) else str(value).strip().lower()
    if text in TRUTHY_VALUES:
        return True
    if text in FALSY_VALUES:
        return False
    raise ValueError(f"Cannot read '{value}' as yes/no.")


def parse_biome_list(cell) -> frozenset:
    if _is_blank(cell):
        return frozenset()
    return frozenset(b.strip().lower() for b in str(cell).split(",") if b.strip())


def parse_species(df: pd.DataFrame) -> SpeciesCatalog:
    """Convert a species DataFrame into a SpeciesCatalog."""
    species = []
    for _, row in df.iterrows():
        carnivore = row.get("Carnivore") if "Carnivore" in df.columns else None
        species.append(Species(
            species_id=str(row["Species"]).strip().upper(),
            unit_size=int(row["Unit Size"]),
            biomes=parse_biome_list(row["Biomes"]),
            is_carnivore=parse_flag(carnivore),
        ))
    logger.info("Parsed %d species", len(species))
    return SpeciesCatalog(species)


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for multi-tab Excel (case-insensitive matching)
SHEET_ALIASES = {
    "enclosures": ["enclosures", "enclosure", "recintos", "recinto", "roster"],
    "species": ["species", "catalog", "animais", "animals", "especies", "espécies"],
}


def _match_sheet(sheet_names: List[str], category: str) -> Optional[str]:
    """Find a sheet name matching the given category, or None."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    return None


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
    """Load an Excel file with an Enclosures tab and an optional Species tab.

    Sheet names are matched case-insensitively. Accepted names include:
    - Enclosures: 'Enclosures', 'Recintos', 'Roster', etc.
    - Species: 'Species', 'Animais', 'Catalog', etc.

    Returns (enclosures_df, species_df); species_df is None when absent.
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    enclosures_sheet = _match_sheet(sheet_names, "enclosures")
    if enclosures_sheet is None:
        raise ValueError(
            f"Could not find a sheet for 'enclosures'. "
            f"Expected one of: {SHEET_ALIASES['enclosures']}. "
            f"Found sheets: {sheet_names}"
        )
    species_sheet = _match_sheet(sheet_names, "species")

    enclosures_df = pd.read_excel(xl, sheet_name=enclosures_sheet)
    species_df = pd.read_excel(xl, sheet_name=species_sheet) if species_sheet else None

    return enclosures_df, species_df
