"""Tests for the table builders and widgets behind the Streamlit tabs."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime

import pandas as pd

from components import metrics_cards
from engine.analyzer import default_analyzer
from models.audit import AuditEntry
from tabs.tab_admin import _history_rows
from tabs.tab_analysis import _evaluation_rows


class FakeColumn:
    def __init__(self):
        self.calls = []

    def metric(self, **kwargs):
        self.calls.append(kwargs)


class TestEvaluationRows:
    def test_rejected_enclosures_have_no_free_after(self):
        rows = _evaluation_rows(default_analyzer().analyze("LEAO", 1))
        by_id = {r["Enclosure"]: r for r in rows}
        assert by_id[5]["Free After"] == 3
        assert by_id[1]["Free After"] is None
        assert by_id[1]["Verdict"] == "rejected"

    def test_free_after_column_is_numeric(self):
        df = pd.DataFrame(_evaluation_rows(default_analyzer().analyze("MACACO", 2)))
        assert pd.api.types.is_numeric_dtype(df["Free After"])


class TestHistoryRows:
    def test_missing_quantity_is_none(self):
        log = [
            AuditEntry(datetime(2026, 1, 1, 9, 0), "reset", None, None, "default roster"),
            AuditEntry(datetime(2026, 1, 1, 9, 5), "analyze", "LEAO", 1, "viable: 5"),
        ]
        rows = _history_rows(log)
        assert [r["Action"] for r in rows] == ["analyze", "reset"]
        assert rows[0]["Quantity"] == 1
        assert rows[1]["Quantity"] is None
        assert pd.api.types.is_numeric_dtype(pd.DataFrame(rows)["Quantity"])


class TestRenderMetricRow:
    def test_one_card_per_metric(self, monkeypatch):
        columns = [FakeColumn(), FakeColumn()]
        monkeypatch.setattr(metrics_cards.st, "columns", lambda n: columns[:n])

        metrics_cards.render_metric_row([
            {"label": "Enclosures", "value": 5},
            {"label": "Free Space", "value": 21},
        ])

        assert columns[0].calls == [{"label": "Enclosures", "value": 5}]
        assert columns[1].calls == [{"label": "Free Space", "value": 21}]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
