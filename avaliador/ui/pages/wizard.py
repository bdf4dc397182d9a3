"""Wizard page rendering.

Renders the welcome screen and one question at a time. Widgets are bound
to the wizard snapshot: their session keys are refreshed from the answers
before each render, and their callbacks feed changes back through the
wizard update functions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st

from avaliador.application.services import wizard
from avaliador.core.exceptions import ReferenceDataError
from avaliador.core.logging import get_logger
from avaliador.domain.models.answers import (
    CONDITION_LABELS,
    ENERGY_CLASSES,
    KIND_LABELS,
    LAYOUT_OPTIONS,
    YES_NO_LABELS,
    PropertyKind,
)
from avaliador.domain.models.reference import RegionCatalog
from avaliador.domain.models.steps import AMENITY_FIELDS, STEP_HINTS, STEP_TITLES, Step
from avaliador.domain.sequencer import validation_message
from avaliador.ui.components.option_cards import enum_options, render_option_cards
from avaliador.ui.components.progress_display import render_step_progress
from avaliador.ui.helpers import from_placeholder, location_options, option_index
from avaliador.ui.state import SessionManager

log = get_logger(__name__)

KIND_DESCRIPTIONS = {
    PropertyKind.HOUSE: "Casa independente ou geminada",
    PropertyKind.APARTMENT: "Fração num edifício",
}

# Numeric text steps: step -> (answer field, placeholder)
TEXT_STEPS: dict[Step, tuple[str, str]] = {
    Step.LIVING_AREA: ("living_area", "123"),
    Step.TOTAL_AREA: ("plot_area", "250"),
    Step.FLOOR: ("floor", "3"),
    Step.YEAR: ("construction_year", "1990"),
}


def _apply(catalog: RegionCatalog | None = None, **changes: Any) -> None:
    """Feed answer changes into the current snapshot."""
    state = SessionManager.get_wizard()
    try:
        SessionManager.set_wizard(wizard.update(state, catalog=catalog, **changes))
    except ReferenceDataError as e:
        log.warning("location_rejected", level=e.level, value=e.value)


def _bind(key: str, value: Any) -> str:
    """Refresh a widget's session value from the snapshot before rendering it."""
    st.session_state[key] = value
    return key


def _from_widget(field: str, key: str) -> None:
    _apply(**{field: st.session_state[key]})


def render_welcome() -> None:
    """Landing screen shown before the questionnaire."""
    st.markdown(
        "<h1 style='text-align:center'>Descobre quanto vale a tua casa</h1>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align:center'>Descubra em menos de 1 minuto com a nossa avaliação gratuita.</p>",
        unsafe_allow_html=True,
    )

    def on_start() -> None:
        SessionManager.set_wizard(wizard.start(SessionManager.get_wizard()))

    st.button("Iniciar avaliação", type="primary", use_container_width=True, on_click=on_start)
    c1, c2, c3 = st.columns(3)
    c1.markdown("✅ Grátis")
    c2.markdown("⏱️ 1 minuto")
    c3.markdown("⚡ Instantâneo")


def _render_text_step(step: Step, state: wizard.WizardState) -> None:
    field, placeholder = TEXT_STEPS[step]
    key = _bind(f"input_{field}", getattr(state.answers, field))
    st.text_input(
        STEP_TITLES[step],
        key=key,
        placeholder=placeholder,
        label_visibility="collapsed",
        on_change=_from_widget,
        args=(field, key),
    )


def _render_choice_step(step: Step, state: wizard.WizardState) -> None:
    answers = state.answers
    if step == Step.TYPE:
        render_option_cards(
            enum_options(KIND_LABELS, KIND_DESCRIPTIONS),
            answers.kind.value if answers.kind else None,
            lambda v: _apply(kind=PropertyKind(v)),
            key="kind",
            columns=2,
        )
    elif step == Step.LAYOUT:
        render_option_cards(
            {code: (code, desc) for code, desc in LAYOUT_OPTIONS.items()},
            answers.layout,
            lambda v: _apply(layout=v),
            key="layout",
        )
    elif step == Step.CONDITION:
        render_option_cards(
            enum_options(CONDITION_LABELS),
            answers.condition.value if answers.condition else None,
            lambda v: _apply(condition=v),
            key="condition",
        )
    elif step == Step.ENERGY_CLASS:
        render_option_cards(
            {cl: (cl, "Eficiência máxima" if cl == "A+" else f"Classe {cl}") for cl in ENERGY_CLASSES},
            answers.energy_class,
            lambda v: _apply(energy_class=v),
            key="energy",
            columns=3,
        )
    elif step in AMENITY_FIELDS:
        field = AMENITY_FIELDS[step]
        current = getattr(answers, field)
        render_option_cards(
            enum_options(YES_NO_LABELS),
            current.value if current else None,
            lambda v: _apply(**{field: v}),
            key=field,
            columns=2,
        )


def _render_location_step(state: wizard.WizardState, catalog: RegionCatalog) -> None:
    answers = state.answers
    options = location_options(catalog, answers.region, answers.sub_region)

    st.text_input(
        "Morada (opcional)",
        key=_bind("input_address", answers.address),
        placeholder="Rua das Flores, 123",
        on_change=_from_widget,
        args=("address", "input_address"),
    )
    for field, label in (("region", "Distrito"), ("sub_region", "Concelho"), ("local_area", "Freguesia")):
        choices = options[field]
        key = f"select_{field}"
        _bind(key, choices[option_index(choices, getattr(answers, field))])
        st.selectbox(
            label,
            choices,
            key=key,
            disabled=len(choices) <= 1,
            on_change=lambda f=field, k=key: _apply(catalog=catalog, **{f: from_placeholder(st.session_state[k])}),
        )


def _render_contact_step(state: wizard.WizardState) -> None:
    answers = state.answers
    st.text_input(
        "Telemóvel",
        key=_bind("input_phone", answers.phone),
        placeholder="+351 9XX XXX XXX",
        on_change=_from_widget,
        args=("phone", "input_phone"),
    )
    st.checkbox(
        "Estou aberto a receber propostas pelo meu imóvel",
        key=_bind("input_accepts_contact", answers.accepts_contact),
        help="Ao aceitar, pode receber contactos sobre o seu imóvel",
        on_change=_from_widget,
        args=("accepts_contact", "input_accepts_contact"),
    )
    st.checkbox(
        "Quero uma avaliação por um profissional gratuita",
        key=_bind("input_wants_professional_evaluation", answers.wants_professional_evaluation),
        help="Um perito qualificado entrará em contacto consigo para agendar uma avaliação presencial sem custos",
        on_change=_from_widget,
        args=("wants_professional_evaluation", "input_wants_professional_evaluation"),
    )


def render_question(
    state: wizard.WizardState,
    catalog: RegionCatalog,
    on_primary: Callable[[], None],
) -> None:
    """Render the current question with its navigation controls.

    Args:
        state: Current wizard snapshot
        catalog: Region catalog for the location selectors
        on_primary: Callback for the main button
    """
    step = state.current

    if not state.is_first:
        st.button(
            "← Voltar",
            on_click=lambda: SessionManager.set_wizard(wizard.retreat(SessionManager.get_wizard())),
        )
    render_step_progress(state)

    with st.container(border=True):
        st.markdown(f"### {STEP_TITLES[step]}")
        st.caption(STEP_HINTS[step])

        if step in TEXT_STEPS:
            _render_text_step(step, state)
        elif step == Step.LOCATION:
            _render_location_step(state, catalog)
        elif step == Step.CONTACT:
            _render_contact_step(state)
        else:
            _render_choice_step(step, state)

        message = validation_message(step, state.answers)
        if message:
            st.error(message)

    st.button(
        wizard.primary_action_label(state),
        type="primary",
        use_container_width=True,
        disabled=not wizard.can_advance(state),
        on_click=on_primary,
    )
