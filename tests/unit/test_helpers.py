"""Unit tests for UI helpers and the breakdown table."""

import pytest

from avaliador.domain.calculator.valuation import ValuationBreakdown, breakdown
from avaliador.ui.components.charts import breakdown_frame
from avaliador.ui.helpers import (
    PLACEHOLDER,
    format_adjustment,
    format_euro,
    from_placeholder,
    location_options,
    option_index,
    with_placeholder,
)


class TestFormatting:

    @pytest.mark.parametrize("value,expected", [
        (240000, "240\u00a0000\u00a0€"),
        (348737.4, "348\u00a0737\u00a0€"),
        (0, "0\u00a0€"),
        (1500000, "1\u00a0500\u00a0000\u00a0€"),
        (None, "--"),
        (float("inf"), "--"),
        (float("nan"), "--"),
    ])
    def test_format_euro(self, value, expected):
        assert format_euro(value) == expected

    def test_format_adjustment(self):
        assert format_adjustment(0.05, additive=True) == "+5.0 %"
        assert format_adjustment(-0.1, additive=True) == "-10.0 %"
        assert format_adjustment(1.03, additive=False) == "×1.030"


class TestPlaceholders:

    def test_round_trip(self):
        options = with_placeholder(("Braga", "Porto"))
        assert options[0] == PLACEHOLDER
        assert from_placeholder(options[0]) == ""
        assert from_placeholder("Porto") == "Porto"
        assert from_placeholder(None) == ""

    def test_option_index(self):
        options = with_placeholder(("Braga", "Porto"))
        assert option_index(options, "Porto") == 2
        assert option_index(options, "") == 0
        assert option_index(options, "Faro") == 0

    def test_location_options_cascade(self, region_catalog):
        opts = location_options(region_catalog, "Porto", "")
        assert opts["region"] == [PLACEHOLDER, "Aveiro", "Braga", "Porto"]
        assert opts["sub_region"] == [PLACEHOLDER, "Matosinhos", "Porto"]
        assert opts["local_area"] == [PLACEHOLDER]


class TestBreakdownFrame:
    """Table shown under the result when details are enabled."""

    def test_apartment_rows(self, apartment_answers, price_table):
        frame = breakdown_frame(breakdown(apartment_answers, price_table, 2025))
        assert list(frame.columns) == ["Fator", "Valor", "Impacto (€)"]
        assert len(frame) == 8
        assert frame["Impacto (€)"].sum() == pytest.approx(40_000, abs=1)

    def test_house_rows(self, house_answers, price_table):
        frame = breakdown_frame(breakdown(house_answers, price_table, 2025))
        assert len(frame) == 6
        assert frame["Valor"].iloc[0] == "×1.100"

    def test_empty_breakdown(self):
        assert breakdown_frame(ValuationBreakdown()).empty
