"""Unit tests for avaliador.application.services.reference_data module."""

import json

import pytest

from avaliador.application.services.reference_data import (
    PRICE_NAME_KEY,
    PRICE_VALUE_KEY,
    load_prices,
    load_regions,
    parse_prices,
    parse_regions,
)
from avaliador.core.exceptions import DataLoadError


@pytest.fixture
def raw_regions():
    return [
        {
            "distrito": "Porto",
            "concelhos": [
                {"concelho": "Porto", "freguesias": ["Ramalde", "Bonfim"]},
                {"concelho": "Gondomar", "freguesias": ["Rio Tinto"]},
            ],
        },
        {"distrito": "Braga", "concelhos": []},
    ]


@pytest.fixture
def raw_prices():
    return [
        {PRICE_NAME_KEY: "Porto", PRICE_VALUE_KEY: 3310},
        {PRICE_NAME_KEY: "Lisboa", PRICE_VALUE_KEY: 5190.5},
    ]


class TestParseRegions:
    """Tests for the region hierarchy parser."""

    def test_builds_sorted_catalog(self, raw_regions):
        catalog = parse_regions(raw_regions)
        assert catalog.regions == ("Braga", "Porto")
        assert catalog.sub_regions("Porto") == ("Gondomar", "Porto")
        assert catalog.local_areas("Porto") == ("Bonfim", "Ramalde")

    def test_district_without_municipalities(self, raw_regions):
        assert parse_regions(raw_regions).sub_regions("Braga") == ()

    def test_not_a_list(self):
        with pytest.raises(DataLoadError):
            parse_regions({"distrito": "Porto"})

    def test_invalid_record(self):
        with pytest.raises(DataLoadError):
            parse_regions([{"concelhos": []}])


class TestParsePrices:
    """Tests for the price table parser."""

    def test_valid_records(self, raw_prices):
        table = parse_prices(raw_prices)
        assert table.lookup("Porto") == 3310.0
        assert table.lookup("Lisboa") == 5190.5

    def test_default_passed_through(self, raw_prices):
        assert parse_prices(raw_prices, default=1000.0).lookup("Faro") == 1000.0

    @pytest.mark.parametrize("record", [
        {PRICE_NAME_KEY: "", PRICE_VALUE_KEY: 2000},
        {PRICE_NAME_KEY: "Faro"},
        {PRICE_NAME_KEY: "Faro", PRICE_VALUE_KEY: "2000"},
        {PRICE_NAME_KEY: "Faro", PRICE_VALUE_KEY: True},
        {PRICE_NAME_KEY: "Faro", PRICE_VALUE_KEY: float("nan")},
        "Faro",
    ])
    def test_bad_records_skipped(self, raw_prices, record):
        table = parse_prices(raw_prices + [record])
        assert len(table) == 2
        assert "Faro" not in table.prices

    def test_not_a_list(self):
        with pytest.raises(DataLoadError):
            parse_prices("Porto")


class TestLoadFiles:
    """Tests for loading from disk."""

    def test_load_regions(self, tmp_path, raw_regions):
        path = tmp_path / "regions.json"
        path.write_text(json.dumps(raw_regions), encoding="utf-8")
        assert load_regions(path).sub_regions("Porto") == ("Gondomar", "Porto")

    def test_load_prices_utf8_keys(self, tmp_path, raw_prices):
        path = tmp_path / "prices.json"
        path.write_text(json.dumps(raw_prices, ensure_ascii=False), encoding="utf-8")
        assert load_prices(path).lookup("Porto") == 3310.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="Cannot read"):
            load_regions(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "prices.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DataLoadError):
            load_prices(path)

    def test_bundled_data(self):
        """The shipped datasets load and agree with each other."""
        from avaliador.core.settings import get_settings

        settings = get_settings()
        catalog = load_regions(settings.regions_file)
        prices = load_prices(settings.prices_file)
        assert "Porto" in catalog.regions
        assert prices.lookup("Porto") > 0
        priced = [s for r in catalog.regions for s in catalog.sub_regions(r) if s in prices.prices]
        assert priced
