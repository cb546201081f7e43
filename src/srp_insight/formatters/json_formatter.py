"""JSON formatter for SRP Insight."""

import json
from typing import List

from ..models import SourceReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render(self, reports: List[SourceReport]) -> None:
        print(self.format(reports))

    def format(self, reports: List[SourceReport]) -> str:
        data = [{"origin": r.origin, **r.result.to_dict()} for r in reports]
        return json.dumps(data, indent=2)
