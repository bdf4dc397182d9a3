"""Wizard state and its update functions.

``WizardState`` is an immutable snapshot of the questionnaire. Every user
action goes through one of the functions below, which return a new
snapshot; the UI only ever stores the latest one. The current position is
a step identifier and is re-resolved against the derived sequence after
each update, so editing an earlier answer never leaves the wizard on a
step that no longer applies.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from avaliador.core.exceptions import ReferenceDataError
from avaliador.core.logging import get_logger
from avaliador.domain import sequencer
from avaliador.domain.models.answers import AnswerSet
from avaliador.domain.models.reference import RegionCatalog
from avaliador.domain.models.steps import Step

log = get_logger(__name__)

PRIMARY_LABEL_NEXT = "Seguinte"
PRIMARY_LABEL_SUBMIT = "Obter Avaliação"
PRIMARY_LABEL_RESTART = "Nova Avaliação"


class WizardState(BaseModel):
    """Snapshot of the questionnaire."""

    answers: AnswerSet = Field(default_factory=AnswerSet)
    current: Step = Step.TYPE
    started: bool = Field(default=False, description="Welcome screen dismissed")
    submitted: bool = Field(default=False, description="Answers dispatched to the endpoint")
    current_year: int | None = Field(default=None, description="Override for the building age reference year")

    model_config = {"frozen": True}

    @property
    def sequence(self) -> list[Step]:
        return sequencer.derive_steps(self.answers, self.current_year)

    @property
    def index(self) -> int:
        return sequencer.step_index(self.sequence, self.current)

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_result(self) -> bool:
        return self.current == Step.RESULT


def start(state: WizardState) -> WizardState:
    """Dismiss the welcome screen and position on the first question."""
    log.info("wizard_started")
    return state.model_copy(update={"started": True, "current": Step.TYPE})


def _check_location(answers: AnswerSet, catalog: RegionCatalog) -> None:
    if answers.region and answers.region not in catalog.sub_regions_by_region:
        raise ReferenceDataError("region", answers.region)
    if answers.sub_region and answers.sub_region not in catalog.sub_regions(answers.region):
        raise ReferenceDataError("sub_region", answers.sub_region, answers.region)
    if answers.local_area and answers.local_area not in catalog.local_areas(answers.sub_region):
        raise ReferenceDataError("local_area", answers.local_area, answers.sub_region)


def update(state: WizardState, catalog: RegionCatalog | None = None, **changes: Any) -> WizardState:
    """Apply answer changes and re-resolve the current step.

    Args:
        state: Current snapshot
        catalog: When given, location values must belong to their parent level
        **changes: AnswerSet fields to set

    Returns:
        New snapshot

    Raises:
        ReferenceDataError: If a location value is not in ``catalog``
    """
    answers = state.answers.with_changes(**changes)
    if catalog is not None and any(k in changes for k in ("region", "sub_region", "local_area")):
        _check_location(answers, catalog)

    sequence = sequencer.derive_steps(answers, state.current_year)
    current = sequencer.resolve_position(sequence, state.current)
    if current != state.current:
        log.info("step_repositioned", previous=state.current.value, current=current.value)
    return state.model_copy(update={"answers": answers, "current": current})


def can_advance(state: WizardState) -> bool:
    """Whether the current step's answers allow moving on."""
    return sequencer.is_step_valid(state.current, state.answers)


def advance(state: WizardState) -> WizardState:
    """Move to the next step if the current one is valid (clamped at the end)."""
    if not can_advance(state):
        log.debug("advance_blocked", step=state.current.value)
        return state
    nxt = sequencer.next_step(state.sequence, state.current)
    if nxt != state.current:
        log.info("step_advanced", step=nxt.value)
    return state.model_copy(update={"current": nxt})


def retreat(state: WizardState) -> WizardState:
    """Move to the previous step (clamped at the first)."""
    prev = sequencer.previous_step(state.sequence, state.current)
    return state.model_copy(update={"current": prev})


def mark_submitted(state: WizardState) -> WizardState:
    return state.model_copy(update={"submitted": True})


def reset(state: WizardState | None = None) -> WizardState:
    """Fresh questionnaire, skipping the welcome screen."""
    log.info("wizard_reset")
    year = state.current_year if state is not None else None
    return WizardState(started=True, current_year=year)


def primary_action_label(state: WizardState) -> str:
    """Text of the main button for the current step."""
    if state.current == Step.CONTACT:
        return PRIMARY_LABEL_SUBMIT
    if state.current == Step.RESULT:
        return PRIMARY_LABEL_RESTART
    return PRIMARY_LABEL_NEXT


def progress(state: WizardState) -> float:
    return sequencer.progress_fraction(state.sequence, state.current)
