"""Main Application Entry Point.

Run with ``streamlit run app.py``. Orchestrates the wizard page, the
valuation and the background submission via app_controller.
"""

import os
import sys

import streamlit as st

# Add project root to path if not present (for running from root)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from avaliador.application.services import wizard
from avaliador.core.logging import get_logger
from avaliador.core.settings import get_settings
from avaliador.ui.app_controller import (
    compute_valuation,
    get_reference_data,
    get_submitter,
    handle_primary_action,
)
from avaliador.ui.components.results import render_result
from avaliador.ui.pages.wizard import render_question, render_welcome
from avaliador.ui.state import SessionManager


def on_primary() -> None:
    """Main button: advance, submit on the contact step, restart on the result."""
    _, prices = get_reference_data()
    state, _ = handle_primary_action(SessionManager.get_wizard(), prices, get_submitter())
    SessionManager.set_wizard(state)


def on_restart() -> None:
    SessionManager.set_wizard(wizard.reset(SessionManager.get_wizard()))


def main() -> None:
    """Main application entry point."""
    # Streamlit configuration (must be first Streamlit call)
    st.set_page_config(
        page_title="Avaliação de Imóveis",
        page_icon="🏠",
        layout="centered",
    )
    log = get_logger(__name__)
    settings = get_settings()

    # 1. Initialize session
    SessionManager.initialize()
    state = SessionManager.get_wizard()

    # 2. Welcome screen
    if not state.started:
        log.debug("welcome_rendered")
        render_welcome()
        return

    catalog, prices = get_reference_data()

    # 3. Result step: computed from the answers at render time
    if state.is_result:
        render_result(
            compute_valuation(state, prices),
            on_restart=on_restart,
            show_details=settings.debug_mode,
        )
        return

    # 4. Current question
    render_question(state, catalog, on_primary=on_primary)


if __name__ == "__main__":
    main()
