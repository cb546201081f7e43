"""HTML page formatter for SRP Insight."""

from typing import List, Optional

from ..config import AnalyzerConfig
from ..models import SourceReport
from ..report import render_page
from .base import BaseFormatter


class HtmlFormatter(BaseFormatter):
    """Render each report as a standalone HTML page, separated by blank lines."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config

    def render(self, reports: List[SourceReport]) -> None:
        print(self.format(reports))

    def format(self, reports: List[SourceReport]) -> str:
        return "\n".join(
            render_page(
                r.source,
                r.result,
                r.selected,
                title=f"SRP Insight: {r.origin}",
                config=self.config,
            )
            for r in reports
        )
