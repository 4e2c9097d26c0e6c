"""Default zoo roster and sample datasets for the Zoo Enclosure Planner."""

import os
from typing import List

import pandas as pd

from engine.catalog import DEFAULT_SPECIES, default_catalog
from models.enclosure import Enclosure, Occupant

# (id, biome, total capacity, [(species, count), ...])
DEFAULT_ENCLOSURES = (
    (1, "savana", 10, [("MACACO", 3)]),
    (2, "floresta", 5, []),
    (3, "savana e rio", 7, [("GAZELA", 1)]),
    (4, "rio", 8, []),
    (5, "savana", 9, [("LEAO", 1)]),
)


def default_roster() -> List[Enclosure]:
    """Build a fresh copy of the zoo's current enclosures."""
    catalog = default_catalog()
    roster = []
    for enclosure_id, biome, capacity, residents in DEFAULT_ENCLOSURES:
        occupants = [
            Occupant(species_id, count, catalog.lookup(species_id).unit_size)
            for species_id, count in residents
        ]
        roster.append(Enclosure(enclosure_id, biome, capacity, occupants))
    return roster


def generate_enclosures_df() -> pd.DataFrame:
    """Default roster in the upload format (one row per enclosure)."""
    rows = []
    for enclosure_id, biome, capacity, residents in DEFAULT_ENCLOSURES:
        rows.append({
            "Enclosure ID": enclosure_id,
            "Biome": biome,
            "Total Capacity": capacity,
            "Occupants": "; ".join(f"{count} {species_id}" for species_id, count in residents),
        })
    return pd.DataFrame(rows)


def generate_species_df() -> pd.DataFrame:
    """Default species catalog in the upload format."""
    rows = []
    for s in DEFAULT_SPECIES:
        rows.append({
            "Species": s.species_id,
            "Unit Size": s.unit_size,
            "Biomes": ", ".join(sorted(s.biomes)),
            "Carnivore": "yes" if s.is_carnivore else "no",
        })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_enclosures_df().to_csv(os.path.join(output_dir, "enclosures.csv"), index=False)
    generate_species_df().to_csv(os.path.join(output_dir, "species.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single multi-tab Excel file with both datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_zoo.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_enclosures_df().to_excel(writer, sheet_name="Enclosures", index=False)
        generate_species_df().to_excel(writer, sheet_name="Species", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
