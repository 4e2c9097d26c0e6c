"""Tab 2: Enclosures — current roster and occupancy."""

import streamlit as st
import pandas as pd

from data.session_store import get_catalog, get_enclosures
from engine.occupancy import get_enclosure_utilization
from components.charts import enclosure_occupancy_bar, utilization_donut
from components.metrics_cards import render_metric_row
from config.defaults import ENCLOSURE_SATURATION_THRESHOLD


def render(sidebar_state):
    """Render the Enclosures tab."""
    st.header("Enclosures")

    enclosures = get_enclosures()
    if not enclosures:
        st.info("No enclosures loaded. Load a roster in the Admin tab.")
        return

    utilization = get_enclosure_utilization(enclosures)
    total = sum(u["total_capacity"] for u in utilization)
    used = sum(u["used_space"] for u in utilization)
    empty = sum(1 for u in utilization if not u["residents"])
    saturated = sum(1 for u in utilization if u["utilization_pct"] >= ENCLOSURE_SATURATION_THRESHOLD)

    render_metric_row([
        {"label": "Enclosures", "value": len(utilization)},
        {"label": "Total Space", "value": total},
        {"label": "Free Space", "value": total - used},
        {"label": "Empty Enclosures", "value": empty},
        {"label": "Saturated (>=90%)", "value": saturated},
    ])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(enclosure_occupancy_bar(utilization), use_container_width=True)
    with col2:
        st.plotly_chart(utilization_donut(used, total), use_container_width=True)

    st.divider()

    # --- Roster Detail Table ---
    st.subheader("Roster Detail")
    detail_rows = []
    for u in utilization:
        residents = ", ".join(f"{n} {s}" for s, n in u["residents"].items()) if u["residents"] else "—"
        detail_rows.append({
            "Enclosure": u["enclosure_id"],
            "Biome": u["biome"],
            "Total": u["total_capacity"],
            "Used": u["used_space"],
            "Free": u["free_space"],
            "Occupancy": f"{u['utilization_pct']:.0%}",
            "Residents": residents,
        })
    st.dataframe(pd.DataFrame(detail_rows), use_container_width=True)

    # --- Species Catalog ---
    st.subheader("Species Catalog")
    species_rows = [{
        "Species": s.species_id,
        "Unit Size": s.unit_size,
        "Biomes": ", ".join(sorted(s.biomes)),
        "Carnivore": "yes" if s.is_carnivore else "no",
    } for s in get_catalog()]
    st.dataframe(pd.DataFrame(species_rows), use_container_width=True)
