"""Global sidebar controls for species and quantity selection."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_catalog, get_data_source, get_enclosures, get_settings, set_settings
from config.defaults import MIN_QUANTITY, MAX_QUANTITY, DEFAULT_QUANTITY, LOG_LEVELS
from config.logging_config import setup_logging


@dataclass
class SidebarState:
    species_id: str
    count: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Zoo Enclosure Planner")
        st.divider()

        catalog = get_catalog()
        species_id = st.selectbox(
            "Species",
            options=catalog.species_ids,
            key="sidebar_species",
        )

        count = st.number_input(
            "Quantity",
            min_value=MIN_QUANTITY,
            max_value=MAX_QUANTITY,
            value=DEFAULT_QUANTITY,
            step=1,
            key="sidebar_count",
        )

        st.divider()

        settings = dict(get_settings())
        level = st.selectbox(
            "Log level",
            options=LOG_LEVELS,
            index=LOG_LEVELS.index(settings.get("log_level", "INFO")),
            key="sidebar_log_level",
        )
        if level != settings.get("log_level"):
            settings["log_level"] = level
            set_settings(settings)
            setup_logging(level)

        # Data status indicator
        source = get_data_source()
        if source == "default":
            st.caption("Roster: default zoo")
        else:
            st.caption(f"Roster: {source}")
        st.caption(f"{len(get_enclosures())} enclosures, {len(catalog)} species")

    return SidebarState(
        species_id=species_id,
        count=int(count),
    )
