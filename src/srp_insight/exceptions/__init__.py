"""Exception hierarchy for SRP Insight."""

from .analysis import (
    AnalysisError,
    EmptySourceError,
    FileAccessError,
    SourceTooLargeError,
)
from .base import SrpInsightError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError

__all__ = [
    "SrpInsightError",
    "AnalysisError",
    "EmptySourceError",
    "FileAccessError",
    "SourceTooLargeError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
]
