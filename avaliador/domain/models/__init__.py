"""Data models for the valuation wizard."""

from .answers import AnswerSet, Condition, PropertyKind, YesNo
from .reference import PriceTable, RegionCatalog
from .steps import Step

__all__ = [
    "AnswerSet",
    "Condition",
    "PriceTable",
    "PropertyKind",
    "RegionCatalog",
    "Step",
    "YesNo",
]
