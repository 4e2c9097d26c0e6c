"""Tab 3: Admin — roster upload, settings, query history."""

import streamlit as st
import pandas as pd

from config.logging_config import get_logger
from data.loader import load_file, load_multi_sheet_excel, parse_enclosures, parse_species
from data.validator import validate_enclosures, validate_species
from data.sample_data import generate_enclosures_df, generate_species_df
from data.session_store import (
    get_catalog, get_audit_log, get_settings, set_settings,
    set_roster, reset_roster, add_audit_entry,
)

logger = get_logger(__name__)


def _load_and_validate(enclosures_df, species_df, source: str) -> bool:
    """Validate and store an uploaded roster (and optional species catalog)."""
    errors = []
    warnings = []

    catalog = get_catalog()
    if species_df is not None:
        s_result = validate_species(species_df)
        errors.extend(s_result.errors)
        warnings.extend(s_result.warnings)
        if s_result.is_valid:
            catalog = parse_species(species_df)

    if not errors:
        e_result = validate_enclosures(enclosures_df, catalog)
        errors.extend(e_result.errors)
        warnings.extend(e_result.warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    enclosures = parse_enclosures(enclosures_df, catalog)
    set_roster(catalog, enclosures, source)
    add_audit_entry("upload", f"{len(enclosures)} enclosures", rationale=source)

    st.success(f"Data loaded: {len(enclosures)} enclosures, {len(catalog)} species")
    return True


def _history_rows(audit_log):
    """Newest-first table rows; missing quantities stay None."""
    rows = []
    for entry in reversed(audit_log):
        rows.append({
            "Timestamp": entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Action": entry.action,
            "Species": entry.species_id or "—",
            "Quantity": entry.count,
            "Outcome": entry.outcome,
            "Rationale": entry.rationale,
        })
    return rows


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    # --- Data Upload Section ---
    st.subheader("Roster Upload")
    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file", "Separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file":
        st.caption(
            "Upload one `.xlsx` file with an **Enclosures** sheet and an optional "
            "**Species** sheet (also accepts 'Recintos', 'Animais', etc.)"
        )
        single_file = st.file_uploader("Excel workbook", type=["xlsx"], key="upload_single")
        if st.button("Upload & Validate", type="primary", key="btn_upload_single"):
            if single_file:
                try:
                    e_df, s_df = load_multi_sheet_excel(single_file)
                    _load_and_validate(e_df, s_df, single_file.name)
                except Exception as e:
                    logger.exception("Failed to load %s", single_file.name)
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload an Excel file.")
    else:
        col1, col2 = st.columns(2)
        with col1:
            enclosures_file = st.file_uploader("Enclosures", type=["csv", "xlsx"], key="upload_enclosures")
        with col2:
            species_file = st.file_uploader("Species (optional)", type=["csv", "xlsx"], key="upload_species")

        if st.button("Upload & Validate", type="primary", key="btn_upload_multi"):
            if enclosures_file:
                try:
                    e_df = load_file(enclosures_file)
                    s_df = load_file(species_file) if species_file else None
                    _load_and_validate(e_df, s_df, enclosures_file.name)
                except Exception as e:
                    logger.exception("Failed to load %s", enclosures_file.name)
                    st.error(f"Error loading files: {e}")
            else:
                st.warning("Please upload an enclosures file.")

    col_reset, col_download = st.columns(2)
    with col_reset:
        if st.button("Reset to Default Zoo", key="btn_reset"):
            reset_roster()
            add_audit_entry("reset", "default roster")
            st.success("Default roster restored.")
    with col_download:
        st.download_button(
            "Download Sample Enclosures (CSV)",
            generate_enclosures_df().to_csv(index=False),
            "enclosures.csv",
            "text/csv",
        )
        st.download_button(
            "Download Sample Species (CSV)",
            generate_species_df().to_csv(index=False),
            "species.csv",
            "text/csv",
        )

    st.divider()

    # --- Display Settings ---
    st.subheader("Display Settings")
    settings = dict(get_settings())
    show_explanations = st.checkbox(
        "Show per-enclosure explanations",
        value=settings.get("show_explanations", True),
        key="setting_explanations",
    )
    show_rejected = st.checkbox(
        "Show rejected enclosures in the checks table",
        value=settings.get("show_rejected", False),
        key="setting_rejected",
    )
    if (show_explanations, show_rejected) != (settings.get("show_explanations"), settings.get("show_rejected")):
        settings["show_explanations"] = show_explanations
        settings["show_rejected"] = show_rejected
        set_settings(settings)

    st.divider()

    # --- Query History ---
    st.subheader("Query History")
    audit_log = get_audit_log()
    if audit_log:
        audit_df = pd.DataFrame(_history_rows(audit_log))
        st.dataframe(audit_df, use_container_width=True, height=300)

        csv = audit_df.to_csv(index=False)
        st.download_button("Export History (CSV)", csv, "query_history.csv", "text/csv")
    else:
        st.info("No queries recorded yet.")
