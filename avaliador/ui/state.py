"""Session state management for the Streamlit app.

The session only holds the latest ``WizardState`` snapshot plus the
per-session services. All changes go through the wizard update functions.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from avaliador.application.services.wizard import WizardState

T = TypeVar("T")

WIZARD_KEY = "wizard_state"


def get_state(key: str, default: T) -> T:
    """Get a value from session state, storing the default if absent."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    @classmethod
    def initialize(cls) -> None:
        """Initialize session state with an empty questionnaire."""
        init_state({WIZARD_KEY: WizardState()})

    @classmethod
    def get_wizard(cls) -> WizardState:
        return get_state(WIZARD_KEY, WizardState())

    @classmethod
    def set_wizard(cls, state: WizardState) -> None:
        """Replace the current snapshot."""
        set_state(WIZARD_KEY, state)

