"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_verdict_table(df: pd.DataFrame, verdict_column: str = "Verdict"):
    """Render per-enclosure checks with viable/rejected highlighting."""
    def color_verdict(val):
        if val == "viable":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        elif val == "rejected":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        return ""

    if verdict_column in df.columns:
        styled = df.style.map(color_verdict, subset=[verdict_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
