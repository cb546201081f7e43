"""Errors raised while loading and validating ``AnalyzerConfig``."""

from pathlib import Path
from typing import Any

from .base import SrpInsightError


class ConfigurationError(SrpInsightError):
    """A config file, ``SRP_INSIGHT_*`` variable or CLI override was rejected."""


class ConfigFileError(ConfigurationError):
    """A TOML config file is missing or cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot use config file {path}", details={"path": str(path), "reason": reason}
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A setting has a value the analyzer cannot use, or an unknown key.

    *key* is the field name, or the environment variable name when the
    value came from the environment.
    """

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for {key}: {value!r}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
