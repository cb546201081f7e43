"""Lexical analysis stages: dependencies, method usage, responsibility verdict."""

from .classifier import classify, group_responsibilities
from .dependencies import extract_dependencies
from .usages import extract_method_usages

__all__ = [
    "extract_dependencies",
    "extract_method_usages",
    "classify",
    "group_responsibilities",
]
