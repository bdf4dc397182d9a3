"""UI helper functions.

Common formatting utilities, kept free of Streamlit calls so they can be
unit tested.
"""

from __future__ import annotations

import math

from avaliador.domain.models.reference import RegionCatalog

PLACEHOLDER = "Selecione"


def format_euro(value: float | None) -> str:
    """Format an amount as whole euros, Portuguese style.

    Args:
        value: Amount to format

    Returns:
        Formatted string like "240\u00a0000\u00a0€" (no-break spaces), or "--" when there is no finite value
    """
    if value is None or not math.isfinite(value):
        return "--"
    return f"{int(round(value)):,}".replace(",", "\u00a0") + "\u00a0€"


def format_adjustment(value: float, additive: bool) -> str:
    """Format an adjustment (+5 %) or a factor (×1.03) for display."""
    if additive:
        return f"{value * 100:+.1f} %"
    return f"×{value:.3f}"


def with_placeholder(options: tuple[str, ...]) -> list[str]:
    """Prepend the empty "Selecione" choice to a list of options."""
    return [PLACEHOLDER, *options]


def from_placeholder(choice: str | None) -> str:
    """Map the placeholder choice back to an empty answer."""
    return "" if not choice or choice == PLACEHOLDER else choice


def option_index(options: list[str], value: str) -> int:
    """Index of ``value`` in ``options``, 0 (placeholder) if absent."""
    try:
        return options.index(value)
    except ValueError:
        return 0


def location_options(catalog: RegionCatalog, region: str, sub_region: str) -> dict[str, list[str]]:
    """Cascading choices for the three location selectors."""
    return {
        "region": with_placeholder(catalog.regions),
        "sub_region": with_placeholder(catalog.sub_regions(region)),
        "local_area": with_placeholder(catalog.local_areas(sub_region)),
    }
