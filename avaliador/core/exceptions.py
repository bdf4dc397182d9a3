"""Custom exceptions for the valuation wizard.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class AvaliadorError(Exception):
    """Base exception for all avaliador errors."""
    pass


# --- Data Errors ---

class DataLoadError(AvaliadorError):
    """Failed to load or parse reference data files (regions, prices)."""
    pass


class ReferenceDataError(AvaliadorError):
    """A location value does not belong to the selected parent level."""

    def __init__(self, level: str, value: str, parent: str = ""):
        self.level = level
        self.value = value
        self.parent = parent
        msg = f"Unknown {level} '{value}'"
        if parent:
            msg += f" for '{parent}'"
        super().__init__(msg)


class InvalidParameterError(AvaliadorError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Transport Errors ---

class SubmissionError(AvaliadorError):
    """The spreadsheet endpoint rejected the submission."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Submission to {url} failed with HTTP {status_code}")


# --- Configuration Errors ---

class ConfigurationError(AvaliadorError):
    """Error in application configuration."""
    pass
