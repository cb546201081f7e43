"""Analysis-related exceptions: input size, file access, blank input."""

from pathlib import Path

from .base import SrpInsightError


class AnalysisError(SrpInsightError):
    """Base class for analysis-related errors."""
    pass


class SourceTooLargeError(AnalysisError):
    """Raised when the source text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Source is too large to analyze: {size} characters",
            details={"size": str(size), "limit": str(limit)},
        )
        self.size = size
        self.limit = limit


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class EmptySourceError(AnalysisError):
    """Raised by the shell when the input is blank or whitespace-only."""

    def __init__(self, origin: str):
        super().__init__(f"Nothing to analyze in {origin}", details={"origin": origin})
        self.origin = origin
