"""Application controller - orchestrates UI and business logic.

Each function represents a distinct phase of the application flow and
returns new wizard snapshots rather than mutating session state, so the
flow can be tested without a running Streamlit server.
"""

from __future__ import annotations

import streamlit as st

from avaliador.application.services import wizard
from avaliador.application.services.reference_data import load_prices, load_regions
from avaliador.application.services.submission import BackgroundSubmitter, SubmissionClient
from avaliador.application.services.wizard import WizardState
from avaliador.core.exceptions import ConfigurationError, DataLoadError
from avaliador.core.logging import get_logger
from avaliador.core.settings import AppSettings, get_settings
from avaliador.domain.calculator.valuation import ValuationBreakdown, breakdown
from avaliador.domain.models.reference import PriceTable, RegionCatalog
from avaliador.domain.models.steps import Step

log = get_logger(__name__)


def load_reference_data(settings: AppSettings) -> tuple[RegionCatalog, PriceTable]:
    """Load region and price data, degrading to empty data on failure.

    Args:
        settings: Application settings holding the file paths

    Returns:
        Tuple of (region catalog, price table)
    """
    try:
        catalog = load_regions(settings.regions_file)
    except DataLoadError as e:
        log.error("regions_load_failed", error=str(e))
        st.error(f"Erro ao carregar as localizações: {e}")
        catalog = RegionCatalog()

    try:
        prices = load_prices(settings.prices_file, default=settings.default_price_per_m2)
    except DataLoadError as e:
        log.error("prices_load_failed", error=str(e))
        st.warning("Preços por concelho indisponíveis, será usado o preço médio por defeito.")
        prices = PriceTable(default=settings.default_price_per_m2)

    return catalog, prices


@st.cache_resource
def get_reference_data() -> tuple[RegionCatalog, PriceTable]:
    """Reference data shared by all sessions."""
    return load_reference_data(get_settings())


def build_submitter(settings: AppSettings) -> BackgroundSubmitter:
    """Create the background submitter; without a valid URL submissions are skipped."""
    client = None
    if settings.submission_url:
        try:
            client = SubmissionClient(settings.submission_url, timeout=settings.submission_timeout_s)
        except ConfigurationError as e:
            log.error("submission_disabled", error=str(e))
    else:
        log.info("submission_disabled", reason="no_endpoint")
    return BackgroundSubmitter(client)


@st.cache_resource
def get_submitter() -> BackgroundSubmitter:
    """Submitter shared by all sessions (one worker thread)."""
    return build_submitter(get_settings())


def compute_valuation(state: WizardState, prices: PriceTable) -> ValuationBreakdown:
    """Run the valuation engine on the current answers."""
    result = breakdown(state.answers, prices, state.current_year)
    log.info(
        "valuation_computed",
        kind=state.answers.kind.value if state.answers.kind else None,
        sub_region=state.answers.sub_region,
        price_per_m2=result.price_per_m2,
        value=result.value,
    )
    return result


def submit_and_advance(
    state: WizardState,
    prices: PriceTable,
    submitter: BackgroundSubmitter,
) -> tuple[WizardState, ValuationBreakdown]:
    """Contact step: dispatch the answers and move to the result immediately.

    The submission outcome is never awaited. A snapshot already marked as
    submitted (repeated button callback) is not dispatched again.
    """
    result = compute_valuation(state, prices)
    if state.submitted:
        log.info("submission_already_dispatched")
    else:
        submitter.dispatch(state.answers, result.value)
    return wizard.advance(wizard.mark_submitted(state)), result


def handle_primary_action(
    state: WizardState,
    prices: PriceTable,
    submitter: BackgroundSubmitter,
) -> tuple[WizardState, ValuationBreakdown | None]:
    """Apply the main button of the current step.

    Args:
        state: Current snapshot
        prices: Price table for the valuation
        submitter: Background submitter used on the contact step

    Returns:
        Tuple of (new snapshot, valuation when one was computed)
    """
    if state.current == Step.RESULT:
        return wizard.reset(state), None
    if state.current == Step.CONTACT:
        if not wizard.can_advance(state):
            return state, None
        return submit_and_advance(state, prices, submitter)
    return wizard.advance(state), None
