"""
SRP Insight - dependency and responsibility analysis for C#-like classes

Reads a single class's source text, finds its injected dependencies,
maps them to the methods that use them and flags classes that look like
several responsibilities sharing one type. A highlight overlay shows each
dependency's footprint in color.
"""

__version__ = "0.1.0"

from .api import analyze, highlight
from .models import (
    AnalysisResult,
    Classification,
    DependencyDescriptor,
    MethodUsage,
    ResponsibilityGroup,
)

__all__ = [
    "analyze",  # Main entry point
    "highlight",
    "AnalysisResult",
    "Classification",
    "DependencyDescriptor",
    "MethodUsage",
    "ResponsibilityGroup",
]
