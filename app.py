"""Zoo Enclosure Planner — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from config.logging_config import setup_logging
from data.session_store import initialize_session_state, get_settings
from tabs import tab_analysis, tab_enclosures, tab_admin


def main():
    st.set_page_config(
        page_title="Zoo Enclosure Planner",
        page_icon="🦁",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    setup_logging(get_settings().get("log_level", "INFO"))
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "🔎 Feasibility Analysis",
        "🏞️ Enclosures",
        "⚙️ Admin",
    ])

    with tab1:
        tab_analysis.render(sidebar_state)
    with tab2:
        tab_enclosures.render(sidebar_state)
    with tab3:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
