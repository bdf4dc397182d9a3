"""Settings, logging and exception types."""

from .exceptions import (
    AvaliadorError,
    ConfigurationError,
    DataLoadError,
    InvalidParameterError,
    ReferenceDataError,
    SubmissionError,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    # Exceptions
    "AvaliadorError",
    "ConfigurationError",
    "DataLoadError",
    "InvalidParameterError",
    "ReferenceDataError",
    "SubmissionError",
]
