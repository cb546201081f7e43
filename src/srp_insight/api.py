"""Public API for SRP Insight.

Example:
    >>> from srp_insight import analyze, highlight
    >>>
    >>> result = analyze(source, filter_framework_types=True)
    >>> result.has_multiple_responsibilities
    True
    >>> markup = highlight(source, result, selected_type_name="IOrderService")
"""

from __future__ import annotations

from typing import Optional

from .analysis import (
    classify,
    extract_dependencies,
    extract_method_usages,
    group_responsibilities,
)
from .analysis.patterns import find_class_name
from .config import DEFAULT_CONFIG, AnalyzerConfig
from .exceptions import SourceTooLargeError
from .highlight import highlight as _highlight
from .logging_config import get_logger
from .models import AnalysisResult

logger = get_logger(__name__)


def analyze(
    source_text: str,
    filter_framework_types: Optional[bool] = None,
    *,
    config: Optional[AnalyzerConfig] = None,
) -> AnalysisResult:
    """Analyze one class for signs of multiple responsibilities.

    Malformed or partial source never raises: a class without a recognizable
    constructor, field or method simply yields an empty or partial result.
    Blank input should be short-circuited by the caller.

    Args:
        source_text: Source of a single C#-like class
        filter_framework_types: Hide framework services such as ``ILogger``;
            defaults to ``config.filter_framework_types``
        config: Analyzer configuration (default: ``DEFAULT_CONFIG``)

    Returns:
        AnalysisResult built from scratch for this call

    Raises:
        SourceTooLargeError: If the text exceeds ``config.max_source_chars``
    """
    config = config or DEFAULT_CONFIG
    if filter_framework_types is None:
        filter_framework_types = config.filter_framework_types

    if len(source_text) > config.max_source_chars:
        raise SourceTooLargeError(len(source_text), config.max_source_chars)

    dependencies = extract_dependencies(
        source_text,
        filter_framework_types,
        palette=config.palette,
        framework_types=config.framework_types,
    )
    method_usages = extract_method_usages(source_text, dependencies)
    verdict = classify(dependencies, method_usages)

    logger.debug(
        "Analysis complete: %d dependencies, %d methods, multiple responsibilities=%s",
        len(dependencies),
        len(method_usages),
        verdict.has_multiple_responsibilities,
    )

    return AnalysisResult(
        dependencies=tuple(dependencies),
        method_usages=tuple(method_usages),
        has_multiple_responsibilities=verdict.has_multiple_responsibilities,
        mixed_methods=verdict.mixed_methods,
        responsibility_groups=tuple(group_responsibilities(dependencies, method_usages)),
        class_name=find_class_name(source_text),
    )


def highlight(
    source_text: str,
    result: AnalysisResult,
    selected_type_name: Optional[str] = None,
    *,
    config: Optional[AnalyzerConfig] = None,
) -> str:
    """Render escaped markup for *source_text*, optionally focused on one dependency."""
    config = config or DEFAULT_CONFIG
    return _highlight(
        source_text,
        result,
        selected_type_name,
        unselected_opacity=config.unselected_opacity,
    )
