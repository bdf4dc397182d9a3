"""Valuation engine.

Estimates the market value of a property from the wizard answers and the
municipality's average price per m². Apartments use an additive adjustment
model on top of a base price; houses use a multiplicative factor model on a
weighted area (living area counts more than the rest of the plot).
"""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from avaliador.domain.calculator.parsing import parse_float, parse_int, round_half_up
from avaliador.domain.models.answers import AnswerSet, Condition, PropertyKind, YesNo
from avaliador.domain.models.reference import PriceTable

# Apartment: base = living area x coefficient x price/m²
APARTMENT_AREA_COEFFICIENT = 1.25

# House: weighted area = living x 0.75 + (total - living) x 0.35
HOUSE_LIVING_WEIGHT = 0.75
HOUSE_PLOT_WEIGHT = 0.35

# Layout rank (T0..T3, 4 means "T4 or more")
LAYOUT_ADJUSTMENTS = {0: -0.15, 1: -0.10, 2: -0.05, 3: 0.0, 4: 0.10}
LAYOUT_FACTORS = {0: 0.85, 1: 0.90, 2: 0.95, 3: 1.00, 4: 1.10}

# (minimum age exclusive, value) checked in order; younger buildings get the last entry
AGE_ADJUSTMENTS = ((20, -0.10), (15, -0.05), (10, 0.0))
AGE_BONUS_ADJUSTMENT = 0.15
AGE_FACTORS = ((20, 0.90), (15, 0.95), (10, 1.00))
AGE_BONUS_FACTOR = 1.15

CONDITION_ADJUSTMENTS = {Condition.GOOD: 0.10, Condition.NEEDS_RENOVATION: -0.05}
CONDITION_FACTORS = {Condition.GOOD: 1.10, Condition.NEEDS_RENOVATION: 0.95}

ENERGY_ADJUSTMENTS = {"A+": 0.05, "A": 0.02, "B": 0.02}
ENERGY_FACTORS = {"A+": 1.05, "A": 1.02, "B": 1.02}

GROUND_FLOOR_ADJUSTMENT = -0.05
HIGH_FLOOR_WITH_ELEVATOR = 0.03
HIGH_FLOOR_WITHOUT_ELEVATOR = -0.10
ELEVATOR_BONUS = 0.05
GARAGE_ADJUSTMENT = 0.05
BALCONY_ADJUSTMENT = 0.02

POOL_FACTOR = 1.03
GARDEN_FACTOR = 1.005

_LAYOUT_RE = re.compile(r"^T(\d+)\+?$")


class ValuationBreakdown(BaseModel):
    """Intermediate values of a valuation, for display and auditing."""

    kind: Optional[PropertyKind] = None
    price_per_m2: float = 0.0
    base_value: float = Field(default=0.0, description="Value before adjustments in €")
    adjustments: dict[str, float] = Field(
        default_factory=dict,
        description="Additive adjustments (apartment) or multiplicative factors (house)",
    )
    multiplier: float = 1.0
    value: int = 0

    @property
    def is_additive(self) -> bool:
        return self.kind == PropertyKind.APARTMENT


def layout_rank(layout: str) -> Optional[int]:
    """Bedroom count of a layout code, capped at 4 (T4+). None if unrecognized."""
    m = _LAYOUT_RE.match((layout or "").strip().upper())
    if not m:
        return None
    return min(int(m.group(1)), 4)


def building_age(construction_year: str, current_year: int | None = None) -> Optional[int]:
    """Age in years, or None when the year cannot be parsed."""
    year = parse_int(construction_year)
    if year is None:
        return None
    return (current_year or date.today().year) - year


def _finite(amount: float) -> float:
    """Amounts that overflow a float count as 0."""
    return amount if math.isfinite(amount) else 0.0


def _by_age(age: Optional[int], table, bonus: float, neutral: float) -> float:
    if age is None:
        return neutral
    for threshold, value in table:
        if age > threshold:
            return value
    return bonus


# --- Apartment adjustments ---

def layout_adjustment(layout: str) -> float:
    rank = layout_rank(layout)
    return LAYOUT_ADJUSTMENTS.get(rank, 0.0) if rank is not None else 0.0


def age_adjustment(construction_year: str, current_year: int | None = None) -> float:
    return _by_age(building_age(construction_year, current_year), AGE_ADJUSTMENTS, AGE_BONUS_ADJUSTMENT, 0.0)


def condition_adjustment(condition: Condition | None) -> float:
    return CONDITION_ADJUSTMENTS.get(condition, 0.0)


def energy_adjustment(energy_class: str) -> float:
    return ENERGY_ADJUSTMENTS.get((energy_class or "").upper(), 0.0)


def floor_adjustment(floor: str, elevator: YesNo | None) -> float:
    """Ground floors lose value; high floors depend on the elevator."""
    level = parse_int(floor)
    if level is None:
        return 0.0
    if level == 0:
        return GROUND_FLOOR_ADJUSTMENT
    if level >= 3:
        return HIGH_FLOOR_WITH_ELEVATOR if elevator == YesNo.YES else HIGH_FLOOR_WITHOUT_ELEVATOR
    return 0.0


def elevator_bonus(floor: str, elevator: YesNo | None) -> float:
    """Stacks with ``floor_adjustment`` from the second floor up."""
    level = parse_int(floor)
    if level is None:
        return 0.0
    return ELEVATOR_BONUS if level >= 2 and elevator == YesNo.YES else 0.0


# --- House factors ---

def layout_factor(layout: str) -> float:
    rank = layout_rank(layout)
    return LAYOUT_FACTORS.get(rank, 1.0) if rank is not None else 1.0


def age_factor(construction_year: str, current_year: int | None = None) -> float:
    return _by_age(building_age(construction_year, current_year), AGE_FACTORS, AGE_BONUS_FACTOR, 1.0)


def condition_factor(condition: Condition | None) -> float:
    return CONDITION_FACTORS.get(condition, 1.0)


def energy_factor(energy_class: str) -> float:
    return ENERGY_FACTORS.get((energy_class or "").upper(), 1.0)


def _apartment_breakdown(answers: AnswerSet, price: float, current_year: int | None) -> ValuationBreakdown:
    living = parse_float(answers.living_area) or 0.0
    base = _finite(living * APARTMENT_AREA_COEFFICIENT * price)

    adjustments = {
        "layout": layout_adjustment(answers.layout),
        "age": age_adjustment(answers.construction_year, current_year),
        "condition": condition_adjustment(answers.condition),
        "energy": energy_adjustment(answers.energy_class),
        "floor": floor_adjustment(answers.floor, answers.elevator),
        "elevator": elevator_bonus(answers.floor, answers.elevator),
        "garage": GARAGE_ADJUSTMENT if answers.garage == YesNo.YES else 0.0,
        "balcony": BALCONY_ADJUSTMENT if answers.balcony == YesNo.YES else 0.0,
    }
    total = 0.0
    for adj in adjustments.values():
        total += adj
    multiplier = 1 + total

    return ValuationBreakdown(
        kind=PropertyKind.APARTMENT,
        price_per_m2=price,
        base_value=base,
        adjustments=adjustments,
        multiplier=multiplier,
        value=round_half_up(base * multiplier),
    )


def _house_breakdown(answers: AnswerSet, price: float, current_year: int | None) -> ValuationBreakdown:
    living = parse_float(answers.living_area) or 0.0
    # Without a plot area the total area equals the living area
    total_area = parse_float(answers.plot_area or answers.living_area) or 0.0
    weighted_area = living * HOUSE_LIVING_WEIGHT + (total_area - living) * HOUSE_PLOT_WEIGHT
    base = _finite(weighted_area * price)

    factors = {
        "layout": layout_factor(answers.layout),
        "age": age_factor(answers.construction_year, current_year),
        "condition": condition_factor(answers.condition),
        "pool": POOL_FACTOR if answers.pool == YesNo.YES else 1.0,
        "garden": GARDEN_FACTOR if answers.garden == YesNo.YES else 1.0,
        "energy": energy_factor(answers.energy_class),
    }
    multiplier = 1.0
    for factor in factors.values():
        multiplier *= factor

    return ValuationBreakdown(
        kind=PropertyKind.HOUSE,
        price_per_m2=price,
        base_value=base,
        adjustments=factors,
        multiplier=multiplier,
        value=round_half_up(base * multiplier),
    )


def breakdown(
    answers: AnswerSet,
    prices: PriceTable,
    current_year: int | None = None,
) -> ValuationBreakdown:
    """Compute the valuation with all intermediate values.

    Args:
        answers: Completed answer set
        prices: Price per m² reference table
        current_year: Year used to compute the building age (defaults to today)

    Returns:
        Breakdown whose ``value`` is 0 when the property kind is not set
    """
    price = prices.lookup(answers.sub_region)
    if answers.kind == PropertyKind.APARTMENT:
        return _apartment_breakdown(answers, price, current_year)
    if answers.kind == PropertyKind.HOUSE:
        return _house_breakdown(answers, price, current_year)
    return ValuationBreakdown(price_per_m2=price)


def estimate(
    answers: AnswerSet,
    prices: PriceTable,
    current_year: int | None = None,
) -> int:
    """Estimated market value in whole euros (0 for an unknown property kind)."""
    return breakdown(answers, prices, current_year).value
