"""Randomized invariant checks over many generated answer sets."""

import random

import pytest

from avaliador.application.services import wizard
from avaliador.application.services.wizard import WizardState
from avaliador.domain.calculator.valuation import breakdown, estimate
from avaliador.domain.models.answers import ENERGY_CLASSES, LAYOUT_OPTIONS, AnswerSet
from avaliador.domain.models.steps import STEP_CATALOG, Step
from avaliador.domain.sequencer import derive_steps, next_step, previous_step, resolve_position

YEAR = 2025
N_CASES = 200


def random_answers(rng: random.Random) -> AnswerSet:
    yes_no = [None, "yes", "no"]
    return AnswerSet(
        kind=rng.choice([None, "house", "apartment"]),
        living_area=rng.choice(["", "abc", str(rng.randint(20, 400))]),
        plot_area=rng.choice(["", str(rng.randint(100, 2000))]),
        floor=rng.choice(["", "0", str(rng.randint(1, 12))]),
        layout=rng.choice(["", *LAYOUT_OPTIONS]),
        construction_year=rng.choice(["", "20x0", str(rng.randint(1900, 2025))]),
        condition=rng.choice([None, "good", "needs_renovation"]),
        energy_class=rng.choice(["", *ENERGY_CLASSES]),
        elevator=rng.choice(yes_no),
        balcony=rng.choice(yes_no),
        garage=rng.choice(yes_no),
        pool=rng.choice(yes_no),
        garden=rng.choice(yes_no),
        sub_region=rng.choice(["", "Porto", "Lisboa", "Espinho"]),
    )


@pytest.fixture
def cases():
    rng = random.Random(42)
    return [random_answers(rng) for _ in range(N_CASES)]


class TestSequenceInvariants:

    def test_sequence_is_ordered_subset_of_catalog(self, cases):
        for answers in cases:
            steps = derive_steps(answers, YEAR)
            positions = [STEP_CATALOG.index(s) for s in steps]
            assert positions == sorted(positions)
            assert len(set(steps)) == len(steps)
            assert steps[0] == Step.TYPE and steps[-1] == Step.RESULT

    def test_resolved_position_is_always_present(self, cases):
        for answers in cases:
            steps = derive_steps(answers, YEAR)
            for step in STEP_CATALOG:
                assert resolve_position(steps, step) in steps

    def test_navigation_stays_in_bounds(self, cases):
        for answers in cases:
            steps = derive_steps(answers, YEAR)
            for step in steps:
                assert next_step(steps, step) in steps
                assert previous_step(steps, step) in steps

    def test_update_keeps_position_valid(self, cases):
        rng = random.Random(7)
        for answers in cases:
            state = WizardState(answers=answers, current=rng.choice(STEP_CATALOG), current_year=YEAR)
            updated = wizard.update(state, kind=rng.choice(["house", "apartment"]))
            assert updated.current in updated.sequence


class TestValuationInvariants:

    def test_estimate_is_non_negative_int(self, cases, price_table):
        for answers in cases:
            value = estimate(answers, price_table, YEAR)
            assert isinstance(value, int)
            assert value >= 0

    def test_unknown_kind_is_zero(self, cases, price_table):
        for answers in cases:
            if answers.kind is None:
                assert estimate(answers, price_table, YEAR) == 0

    def test_value_scales_with_price(self, cases):
        """Doubling every price doubles the estimate (up to rounding)."""
        from avaliador.domain.models.reference import PriceTable

        low = PriceTable(prices={"Porto": 1000.0}, default=1000.0)
        high = PriceTable(prices={"Porto": 2000.0}, default=2000.0)
        for answers in cases:
            a = estimate(answers, low, YEAR)
            b = estimate(answers, high, YEAR)
            assert abs(b - 2 * a) <= 1

    def test_apartment_adjustments_bounded(self, cases, price_table):
        for answers in cases:
            result = breakdown(answers, price_table, YEAR)
            if result.is_additive:
                assert -0.40 - 1e-9 <= sum(result.adjustments.values()) <= 0.55 + 1e-9
