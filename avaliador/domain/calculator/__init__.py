"""Valuation formulas and input parsing."""

from .valuation import ValuationBreakdown, breakdown, estimate

__all__ = ["ValuationBreakdown", "breakdown", "estimate"]
