"""Colorized markup overlay for analyzed source text.

Spans are computed as intervals over the raw text and the text between
interval boundaries is escaped afterwards, so entity text such as ``&lt;``
can never be matched as an identifier.

Span layers, outermost first:
    1. ``srp-method``: tint over a whole method body
    2. ``srp-highlight``: a dependency's parameter, field or type name
    3. ``mixed-responsibility``: the declared name of a method using
       more than one dependency
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analysis.patterns import whole_word
from .models import AnalysisResult

MIXED_METHOD_COLOR = "#fef3c7"

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

_METHOD_LAYER = 1
_DEPENDENCY_LAYER = 2
_MIXED_LAYER = 3


@dataclass(frozen=True)
class _Span:
    start: int
    end: int
    layer: int
    open_tag: str


def escape_html(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def highlight(
    source_text: str,
    result: AnalysisResult,
    selected_type_name: Optional[str] = None,
    *,
    unselected_opacity: float = 0.85,
) -> str:
    """Render *source_text* as escaped markup with dependency highlights.

    Args:
        source_text: The text that was passed to ``analyze``
        result: Analysis of *source_text*
        selected_type_name: Highlight only this dependency, at full opacity
        unselected_opacity: Opacity of highlights when nothing is selected

    Returns:
        Escaped source wrapped in ``<span>`` elements. Without matches this
        is the escaped source and nothing else.
    """
    if selected_type_name is None:
        active = list(result.dependencies)
        opacity = f"{unselected_opacity:g}"
    else:
        active = [dep for dep in result.dependencies if dep.type_name == selected_type_name]
        opacity = "1"

    spans: list[_Span] = []

    for usage in result.method_usages:
        background = None
        if usage.is_mixed:
            background = MIXED_METHOD_COLOR
        elif usage.dependency_keys:
            (key,) = usage.dependency_keys
            dep = result.dependency(key)
            if dep is not None and selected_type_name in (None, dep.type_name):
                background = f"{dep.color}20"
        if background:
            style = f"background-color: {background}; display: inline-block; width: 100%;"
            spans.append(
                _Span(
                    usage.start_index,
                    usage.end_index,
                    _METHOD_LAYER,
                    f'<span class="srp-method" style="{style}">',
                )
            )

    for dep in active:
        seen: set[tuple[int, int]] = set()
        open_tag = f'<span class="srp-highlight" data-dependency="{escape_html(dep.type_name)}" '
        base_style = (
            f"background-color: {dep.color}60; border-bottom: 2px solid {dep.color}; "
            f"opacity: {opacity};"
        )
        targets = [(name, base_style) for name in dep.identifiers]
        targets.append((dep.type_name, f"{base_style} font-weight: 600;"))
        for identifier, style in targets:
            for match in whole_word(identifier).finditer(source_text):
                interval = match.span()
                if interval in seen:
                    continue
                seen.add(interval)
                spans.append(
                    _Span(
                        interval[0],
                        interval[1],
                        _DEPENDENCY_LAYER,
                        f'{open_tag}style="{style}">',
                    )
                )

    for usage in result.method_usages:
        if not usage.is_mixed or usage.name_index < 0:
            continue
        used = ", ".join(
            d.type_name for d in result.dependencies if d.type_name in usage.dependency_keys
        )
        title = escape_html(f"Mixes responsibilities: uses {used}")
        spans.append(
            _Span(
                usage.name_index,
                usage.name_index + len(usage.method_name),
                _MIXED_LAYER,
                f'<span class="mixed-responsibility" title="{title}" '
                f'style="background-color: #fde68a; border-bottom: 2px dashed #d97706;">',
            )
        )

    return _render(source_text, spans)


def _render(source_text: str, spans: list[_Span]) -> str:
    """Interleave escaped text with span tags.

    At one offset, closing tags come before opening tags. Outer spans (lower
    layer, then wider) open first.
    """
    events: list[tuple[int, int, int, int, str]] = []
    for span in spans:
        events.append((span.start, 1, span.layer, -span.end, span.open_tag))
        events.append((span.end, 0, -span.layer, -span.start, "</span>"))
    events.sort(key=lambda e: e[:4])

    parts: list[str] = []
    last = 0
    for index, _kind, _layer, _extent, tag in events:
        if index > last:
            parts.append(escape_html(source_text[last:index]))
            last = index
        parts.append(tag)
    parts.append(escape_html(source_text[last:]))
    return "".join(parts)
