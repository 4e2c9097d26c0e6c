"""Tests for roster loading and validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io

import pandas as pd
import pytest

from data.loader import (
    load_file, load_multi_sheet_excel, parse_enclosures, parse_flag, parse_occupants, parse_species,
    split_occupant_entries,
)
from data.sample_data import default_roster, generate_enclosures_df, generate_species_df
from data.validator import validate_enclosures, validate_species
from engine.analyzer import FeasibilityAnalyzer
from engine.catalog import default_catalog


def make_enclosures_df(rows):
    return pd.DataFrame(rows, columns=["Enclosure ID", "Biome", "Total Capacity", "Occupants"])


def make_workbook(sheets):
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for name, df in sheets.items():
            df.to_excel(writer, sheet_name=name, index=False)
    buffer.seek(0)
    return buffer


class NamedBuffer(io.StringIO):
    def __init__(self, text, name):
        super().__init__(text)
        self.name = name


class TestParseOccupants:
    def test_blank(self):
        assert split_occupant_entries("") == []
        assert split_occupant_entries(None) == []
        assert split_occupant_entries(float("nan")) == []

    def test_several_entries(self):
        assert split_occupant_entries("3 MACACO; 1 gazela") == [("MACACO", 3), ("GAZELA", 1)]

    def test_malformed(self):
        with pytest.raises(ValueError):
            split_occupant_entries("MACACO")
        with pytest.raises(ValueError):
            split_occupant_entries("0 MACACO")

    def test_unit_size_from_catalog(self):
        occupants = parse_occupants("2 GAZELA", default_catalog())
        assert occupants[0].unit_size == 2
        assert occupants[0].space == 4

    def test_unknown_species(self):
        with pytest.raises(ValueError):
            parse_occupants("1 UNICORNIO", default_catalog())


class TestParseEnclosures:
    def test_sample_round_trip_matches_default_roster(self):
        buffer = NamedBuffer(generate_enclosures_df().to_csv(index=False), "enclosures.csv")
        df = load_file(buffer)
        assert parse_enclosures(df, default_catalog()) == default_roster()

    def test_loaded_roster_analyzes_like_default(self):
        enclosures = parse_enclosures(generate_enclosures_df(), default_catalog())
        result = FeasibilityAnalyzer(default_catalog(), enclosures).analyze("MACACO", 2)
        assert [v.enclosure_id for v in result.viable] == [1, 2, 3]

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file(NamedBuffer("", "roster.json"))


class TestLoadMultiSheetExcel:
    def test_sheet_aliases_are_case_insensitive(self):
        buffer = make_workbook({
            "Recintos": generate_enclosures_df(),
            "ANIMAIS": generate_species_df(),
        })
        enclosures_df, species_df = load_multi_sheet_excel(buffer)
        catalog = parse_species(species_df)
        assert sorted(catalog.species_ids) == sorted(default_catalog().species_ids)
        assert parse_enclosures(enclosures_df, catalog) == default_roster()

    def test_species_sheet_is_optional(self):
        buffer = make_workbook({"Enclosures": generate_enclosures_df()})
        enclosures_df, species_df = load_multi_sheet_excel(buffer)
        assert species_df is None
        assert len(enclosures_df) == 5

    def test_missing_enclosures_sheet(self):
        buffer = make_workbook({"Species": generate_species_df()})
        with pytest.raises(ValueError):
            load_multi_sheet_excel(buffer)


class TestParseSpecies:
    def test_sample_round_trip(self):
        catalog = parse_species(generate_species_df())
        default = default_catalog()
        assert sorted(catalog.species_ids) == sorted(default.species_ids)
        for species_id in default.species_ids:
            assert catalog.lookup(species_id) == default.lookup(species_id)

    def test_flags(self):
        assert parse_flag("yes") is True
        assert parse_flag("Sim") is True
        assert parse_flag("no") is False
        assert parse_flag(0) is False
        with pytest.raises(ValueError):
            parse_flag("maybe")


class TestValidateEnclosures:
    def test_sample_is_valid(self):
        result = validate_enclosures(generate_enclosures_df(), default_catalog())
        assert result.is_valid
        assert result.errors == []

    def test_missing_columns(self):
        df = pd.DataFrame([{"Enclosure ID": 1}])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid

    def test_overfull_enclosure(self):
        df = make_enclosures_df([[1, "savana", 5, "3 LEAO"]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid
        assert any("capacity" in e for e in result.errors)

    def test_unknown_species(self):
        df = make_enclosures_df([[1, "savana", 5, "1 UNICORNIO"]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid

    def test_duplicate_ids(self):
        df = make_enclosures_df([[1, "savana", 5, ""], [1, "rio", 5, ""]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid

    def test_non_positive_capacity(self):
        df = make_enclosures_df([[1, "savana", 0, ""]])
        assert not validate_enclosures(df, default_catalog()).is_valid

    def test_unknown_biome_is_a_warning(self):
        df = make_enclosures_df([[1, "deserto", 5, ""]])
        result = validate_enclosures(df, default_catalog())
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_blank_capacity(self):
        df = make_enclosures_df([[1, "savana", float("nan"), "1 LEAO"]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid
        assert any("Total Capacity" in e for e in result.errors)

    def test_missing_capacity_does_not_raise(self):
        df = make_enclosures_df([[1, "savana", None, "1 LEAO"], [2, "rio", 8, ""]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid

    def test_blank_enclosure_id(self):
        df = make_enclosures_df([[None, "savana", 5, ""]])
        result = validate_enclosures(df, default_catalog())
        assert not result.is_valid
        assert any("Enclosure ID" in e for e in result.errors)

    def test_fractional_capacity(self):
        df = make_enclosures_df([[1, "savana", 5.5, ""]])
        assert not validate_enclosures(df, default_catalog()).is_valid

    def test_non_numeric_capacity(self):
        df = make_enclosures_df([[1, "savana", "ten", ""]])
        assert not validate_enclosures(df, default_catalog()).is_valid


class TestValidateSpecies:
    def test_sample_is_valid(self):
        assert validate_species(generate_species_df()).is_valid

    def test_bad_rows(self):
        df = pd.DataFrame([
            {"Species": "LEAO", "Unit Size": 0, "Biomes": "savana", "Carnivore": "yes"},
            {"Species": "LEAO", "Unit Size": 3, "Biomes": "", "Carnivore": "perhaps"},
        ])
        result = validate_species(df)
        assert not result.is_valid
        assert len(result.errors) >= 4

    def test_blank_unit_size(self):
        df = pd.DataFrame([
            {"Species": "LEAO", "Unit Size": None, "Biomes": "savana", "Carnivore": "yes"},
            {"Species": "GAZELA", "Unit Size": 2, "Biomes": "savana", "Carnivore": "no"},
        ])
        result = validate_species(df)
        assert not result.is_valid
        assert any("Unit Size" in e for e in result.errors)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
