"""Tests for result formatting and explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.analyzer import default_analyzer
from engine.explainer import explain_enclosure, explain_result, format_result


class TestFormatResult:
    def test_success_lines(self):
        result = default_analyzer().analyze("LEAO", 1)
        assert format_result(result) == ["Recinto 5 (espaço livre: 3 total: 9)"]

    def test_error_message(self):
        assert format_result(default_analyzer().analyze("UNICORNIO", 1)) == ["Animal inválido"]
        assert format_result(default_analyzer().analyze("GAZELA", 0)) == ["Quantidade inválida"]
        assert format_result(default_analyzer().analyze("MACACO", 10)) == ["Não há recinto viável"]


class TestExplainEnclosure:
    def test_viable_enclosure(self):
        result = default_analyzer().analyze("HIPOPOTAMO", 1)
        ev = next(e for e in result.evaluations if e.enclosure_id == 3)
        steps = explain_enclosure(ev, "HIPOPOTAMO", 1)
        assert len(steps) == 4
        assert "(mixed species)" in steps[1]
        assert steps[-1].startswith("Verdict: viable")

    def test_rejected_enclosure(self):
        result = default_analyzer().analyze("LEAO", 1)
        ev = next(e for e in result.evaluations if e.enclosure_id == 1)
        steps = explain_enclosure(ev, "LEAO", 1)
        assert steps[2].startswith("Cohabitation: rejected")
        assert steps[-1] == "Verdict: not viable"

    def test_biome_mismatch(self):
        result = default_analyzer().analyze("GAZELA", 1)
        ev = next(e for e in result.evaluations if e.enclosure_id == 2)
        assert "does not suit" in explain_enclosure(ev, "GAZELA", 1)[0]


class TestExplainResult:
    def test_one_block_per_enclosure(self):
        lines = explain_result(default_analyzer().analyze("MACACO", 10))
        assert sum(1 for line in lines if line.startswith("Recinto ")) == 5
        assert lines[-1] == "Não há recinto viável"

    def test_invalid_input(self):
        assert explain_result(default_analyzer().analyze("UNICORNIO", 1)) == ["Animal inválido"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
