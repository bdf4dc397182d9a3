"""
Streamlit progress display component.

Renders the questionnaire progress bar and step counter.
"""
import streamlit as st

from avaliador.application.services.wizard import WizardState, progress


def render_step_progress(state: WizardState) -> None:
    """
    Render the progress bar above the current question.

    The result step is not counted, so the bar is full on the contact step.

    Args:
        state: Current wizard snapshot
    """
    if state.is_result:
        return

    sequence = state.sequence
    st.progress(progress(state))
    st.caption(f"Passo {state.index + 1} de {len(sequence) - 1}")
