"""Base formatter interface for SRP Insight output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..models import SourceReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, reports: List[SourceReport]) -> None:
        """Render reports to stdout."""

    @abstractmethod
    def format(self, reports: List[SourceReport]) -> str:
        """Return formatted string representation of reports."""
