"""Wizard, reference data and submission services."""

from .reference_data import load_prices, load_regions
from .submission import BackgroundSubmitter, SubmissionClient, build_payload
from .wizard import WizardState

__all__ = [
    "BackgroundSubmitter",
    "SubmissionClient",
    "WizardState",
    "build_payload",
    "load_prices",
    "load_regions",
]
