"""Tab 1: Feasibility Analysis — where can the new animals go?"""

import streamlit as st
import pandas as pd

from data.session_store import get_analyzer, get_settings, add_audit_entry
from engine.explainer import explain_enclosure, explain_result, format_result
from components.charts import placement_bar
from components.metrics_cards import render_alert_card
from components.tables import render_verdict_table


def _evaluation_rows(result):
    rows = []
    for ev in result.evaluations:
        rows.append({
            "Enclosure": ev.enclosure_id,
            "Biome": ev.biome,
            "Biome OK": "yes" if ev.biome_match else "no",
            "Free Before": ev.free_space,
            "Required": ev.required_space,
            "Extra": ev.extra_space,
            "Cohabitation OK": "yes" if ev.compatible else "no",
            "Free After": ev.remaining_space if ev.qualifies else None,
            "Verdict": "viable" if ev.qualifies else "rejected",
        })
    return rows


def render(sidebar_state):
    """Render the Feasibility Analysis tab."""
    st.header("Feasibility Analysis")
    st.caption(f"Placing **{sidebar_state.count} x {sidebar_state.species_id}**")

    settings = get_settings()
    analyzer = get_analyzer()
    result = analyzer.analyze(sidebar_state.species_id, sidebar_state.count)

    if st.button("Record in history", key="btn_record_analysis"):
        outcome = result.error or "viable: " + ", ".join(str(v.enclosure_id) for v in result.viable)
        add_audit_entry("analyze", outcome, sidebar_state.species_id, sidebar_state.count)
        st.success("Query recorded.")

    if not result.ok:
        render_alert_card(result.message, level="error")
    else:
        st.subheader("Viable Enclosures")
        for line in format_result(result):
            st.markdown(f"- {line}")

        viable_dicts = [{
            "enclosure_id": v.enclosure_id,
            "free_space": v.free_space,
            "total_capacity": v.total_capacity,
        } for v in result.viable]
        st.plotly_chart(placement_bar(viable_dicts), use_container_width=True)

    if not result.evaluations:
        return

    st.divider()

    # --- Per-enclosure checks ---
    st.subheader("Enclosure Checks")
    rows = _evaluation_rows(result)
    if not settings.get("show_rejected", False):
        rows_shown = [r for r in rows if r["Verdict"] == "viable"] or rows
    else:
        rows_shown = rows
    render_verdict_table(pd.DataFrame(rows_shown))

    if settings.get("show_explanations", True):
        for ev in result.evaluations:
            with st.expander(f"Recinto {ev.enclosure_id} ({ev.biome})", expanded=False):
                for step in explain_enclosure(ev, result.species_id, result.count):
                    st.write(step)

    st.download_button(
        "Download Explanation (TXT)",
        "\n".join(explain_result(result)),
        "analysis.txt",
        "text/plain",
    )
