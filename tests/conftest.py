"""Pytest fixtures for avaliador tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from avaliador.core.settings import get_settings
from avaliador.domain.models.answers import AnswerSet
from avaliador.domain.models.reference import PriceTable, RegionCatalog

# Reference year for age-dependent rules, so results don't drift with the calendar
CURRENT_YEAR = 2025


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; make env overrides in a test visible and isolated."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def current_year():
    return CURRENT_YEAR


@pytest.fixture
def price_table():
    """Small price table, Espinho deliberately missing."""
    return PriceTable(prices={"Lisboa": 5000.0, "Porto": 2000.0, "Braga": 1800.0})


@pytest.fixture
def region_catalog():
    """Two districts with a couple of municipalities each."""
    return RegionCatalog.from_mapping({
        "Porto": {
            "Porto": ["Paranhos", "Bonfim", "Ramalde"],
            "Matosinhos": ["Perafita", "Custóias"],
        },
        "Braga": {
            "Braga": ["Gualtar", "Nogueiró"],
        },
        "Aveiro": {
            "Espinho": ["Silvalde", "Paramos"],
        },
    })


@pytest.fixture
def sample_apartment_data():
    """Apartment scenario: 80 m² T2 on the 5th floor in Porto (2000 €/m²)."""
    return {
        "kind": "apartment",
        "living_area": "80",
        "floor": "5",
        "elevator": "yes",
        "layout": "T2",
        "construction_year": "2010",
        "condition": "good",
        "energy_class": "B",
        "garage": "yes",
        "balcony": "no",
        "region": "Porto",
        "sub_region": "Porto",
        "local_area": "Paranhos",
        "phone": "912 345 678",
    }


@pytest.fixture
def sample_house_data():
    """House scenario: 150 m² on a 400 m² plot in Braga (1800 €/m²)."""
    return {
        "kind": "house",
        "living_area": "150",
        "plot_area": "400",
        "layout": "T4+",
        "construction_year": "1995",
        "condition": "needs_renovation",
        "pool": "yes",
        "garden": "no",
        "energy_class": "D",
        "region": "Braga",
        "sub_region": "Braga",
        "local_area": "Gualtar",
        "phone": "934 567 890",
    }


@pytest.fixture
def apartment_answers(sample_apartment_data):
    return AnswerSet(**sample_apartment_data)


@pytest.fixture
def house_answers(sample_house_data):
    return AnswerSet(**sample_house_data)
