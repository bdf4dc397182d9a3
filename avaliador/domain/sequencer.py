"""Step sequencer.

Derives the ordered list of questions from the current answers and decides
whether each step may be left. The sequence is never stored: it is a pure
function of the property kind and the construction year, so positions are
tracked by step identifier and re-resolved whenever the answers change.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from avaliador.core.settings import get_settings
from avaliador.domain.calculator.parsing import count_digits, parse_strict_number, parse_year
from avaliador.domain.models.answers import AnswerSet, PropertyKind
from avaliador.domain.models.steps import AMENITY_FIELDS, STEP_CATALOG, Step

# Buildings older than this many years get the condition question
CONDITION_MIN_AGE = 15


def needs_condition_step(answers: AnswerSet, current_year: int | None = None) -> bool:
    """True when the construction year is a 4-digit year more than 15 years ago."""
    year = parse_year(answers.construction_year)
    if year is None:
        return False
    return (current_year or date.today().year) - year > CONDITION_MIN_AGE


def derive_steps(answers: AnswerSet, current_year: int | None = None) -> list[Step]:
    """Ordered list of steps applicable to ``answers``.

    Args:
        answers: Current answer set
        current_year: Reference year for the building age (defaults to today)

    Returns:
        Steps starting with type/living-area and ending with location/contact/result
    """
    steps = [Step.TYPE, Step.LIVING_AREA]
    if answers.kind == PropertyKind.HOUSE:
        steps.append(Step.TOTAL_AREA)
    elif answers.kind == PropertyKind.APARTMENT:
        steps.append(Step.FLOOR)

    steps += [Step.LAYOUT, Step.YEAR]
    if needs_condition_step(answers, current_year):
        steps.append(Step.CONDITION)
    steps.append(Step.ENERGY_CLASS)

    if answers.kind == PropertyKind.HOUSE:
        steps += [Step.POOL, Step.GARDEN]
    elif answers.kind == PropertyKind.APARTMENT:
        steps += [Step.ELEVATOR, Step.BALCONY, Step.GARAGE]

    steps += [Step.LOCATION, Step.CONTACT, Step.RESULT]
    return steps


def _area(text: str) -> Optional[float]:
    """Strictly numeric area in ``(0, max_area_m2]``, else None."""
    value = parse_strict_number(text)
    if value is None or not 0 < value <= get_settings().max_area_m2:
        return None
    return value


def _year_in_bounds(text: str) -> bool:
    settings = get_settings()
    value = parse_strict_number(text)
    if value is None:
        return False
    return settings.min_construction_year <= value <= settings.max_construction_year


def is_step_valid(step: Step, answers: AnswerSet) -> bool:
    """Whether ``step`` is complete enough to advance past it."""
    if step == Step.TYPE:
        return answers.kind is not None
    if step == Step.LIVING_AREA:
        return _area(answers.living_area) is not None
    if step == Step.TOTAL_AREA:
        total = _area(answers.plot_area)
        living = parse_strict_number(answers.living_area)
        return total is not None and (living is None or total > living)
    if step == Step.FLOOR:
        floor = parse_strict_number(answers.floor)
        return floor is not None and floor >= 0
    if step == Step.LAYOUT:
        return bool(answers.layout)
    if step == Step.YEAR:
        return _year_in_bounds(answers.construction_year)
    if step == Step.CONDITION:
        return answers.condition is not None
    if step == Step.ENERGY_CLASS:
        return bool(answers.energy_class)
    if step in AMENITY_FIELDS:
        return getattr(answers, AMENITY_FIELDS[step]) is not None
    if step == Step.LOCATION:
        return bool(answers.region and answers.sub_region and answers.local_area)
    if step == Step.CONTACT:
        return count_digits(answers.phone) == get_settings().phone_digits
    return True


def validation_message(step: Step, answers: AnswerSet) -> Optional[str]:
    """Inline message for an invalid step, or None.

    Selection steps have no message; the disabled button is enough. The
    phone message only appears once the user started typing digits.
    """
    if is_step_valid(step, answers):
        return None
    settings = get_settings()

    area_message = f"Introduza uma área válida, superior a 0 m² e até {settings.max_area_m2:g} m²."
    if step == Step.LIVING_AREA and answers.living_area.strip():
        return area_message
    if step == Step.TOTAL_AREA and answers.plot_area.strip():
        if _area(answers.plot_area) is None:
            return area_message
        return "A área total tem de ser superior à área útil."
    if step == Step.FLOOR and answers.floor.strip():
        return "Introduza um andar válido (0 ou superior)."
    if step == Step.YEAR and answers.construction_year.strip():
        return (
            f"Introduza um ano entre {settings.min_construction_year} "
            f"e {settings.max_construction_year}."
        )
    if step == Step.CONTACT and count_digits(answers.phone) > 0:
        return f"Por favor, introduza um número de telefone válido com {settings.phone_digits} dígitos"
    return None


# --- Navigation ---

def step_index(sequence: list[Step], step: Step) -> int:
    """0-based position of ``step`` in ``sequence`` (resolved if absent)."""
    return sequence.index(resolve_position(sequence, step))


def resolve_position(sequence: list[Step], step: Step) -> Step:
    """Map a step onto a freshly derived sequence.

    Keeps ``step`` when still present, otherwise falls back to the nearest
    predecessor in catalog order that is present.
    """
    if step in sequence:
        return step
    for candidate in reversed(STEP_CATALOG[: STEP_CATALOG.index(step)]):
        if candidate in sequence:
            return candidate
    return sequence[0]


def next_step(sequence: list[Step], current: Step) -> Step:
    """Step after ``current``, clamped at the last step."""
    idx = step_index(sequence, current)
    return sequence[min(idx + 1, len(sequence) - 1)]


def previous_step(sequence: list[Step], current: Step) -> Step:
    """Step before ``current``, clamped at the first step."""
    idx = step_index(sequence, current)
    return sequence[max(idx - 1, 0)]


def progress_fraction(sequence: list[Step], current: Step) -> float:
    """Completed share of the questionnaire, excluding the result step."""
    span = len(sequence) - 2
    if span <= 0:
        return 1.0
    return min(1.0, max(0.0, step_index(sequence, current) / span))
