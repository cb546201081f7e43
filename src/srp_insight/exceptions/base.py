"""Root of the SRP Insight exception tree.

Shells catch ``SrpInsightError`` once: the CLI prints ``str(error)`` and
exits 1, the browser shell returns ``error.to_dict()`` as the JSON body.
"""

from typing import Dict, Optional


class SrpInsightError(Exception):
    """An input or setting the analyzer cannot work with.

    ``details`` holds string-valued context (a size, a path, a config key)
    that is shown after the message and sent to the browser shell.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def to_dict(self) -> Dict[str, object]:
        return {"error": str(self), "details": dict(self.details)}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
