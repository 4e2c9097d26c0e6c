"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from config.defaults import DEFAULT_LOG_LEVEL
from data.sample_data import default_roster
from engine.analyzer import FeasibilityAnalyzer
from engine.catalog import SpeciesCatalog, default_catalog
from models.enclosure import Enclosure
from models.audit import AuditEntry


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "catalog": default_catalog(),
        "enclosures": default_roster(),
        "data_source": "default",
        "audit_log": [],
        "settings": {
            "log_level": DEFAULT_LOG_LEVEL,
            "show_explanations": True,
            "show_rejected": False,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_catalog() -> SpeciesCatalog:
    return st.session_state.get("catalog") or default_catalog()


def get_enclosures() -> List[Enclosure]:
    return st.session_state.get("enclosures", [])


def get_data_source() -> str:
    return st.session_state.get("data_source", "default")


def get_settings() -> dict:
    return st.session_state.get("settings", {})


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def get_analyzer() -> FeasibilityAnalyzer:
    """Analyzer over a snapshot of the roster currently in session."""
    return FeasibilityAnalyzer(get_catalog(), get_enclosures())


# --- Setters ---

def set_roster(catalog: SpeciesCatalog, enclosures: List[Enclosure], source: str):
    st.session_state["catalog"] = catalog
    st.session_state["enclosures"] = enclosures
    st.session_state["data_source"] = source


def reset_roster():
    set_roster(default_catalog(), default_roster(), "default")


def set_settings(settings: dict):
    st.session_state["settings"] = settings


# --- Audit ---

def add_audit_entry(
    action: str,
    outcome: str,
    species_id: Optional[str] = None,
    count: Optional[int] = None,
    rationale: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        species_id=species_id,
        count=count,
        outcome=outcome,
        rationale=rationale,
    )
    st.session_state["audit_log"].append(entry)
