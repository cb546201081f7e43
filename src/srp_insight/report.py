"""Standalone HTML page around the highlight overlay.

The page is self-contained (inline CSS, no scripts) so it can be opened
from any local file:// path. It carries the legend with each dependency's
color, the verdict banner, the responsibility breakdown and the overlay.
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, AnalyzerConfig
from .highlight import escape_html, highlight
from .models import AnalysisResult


def render_page(
    source_text: str,
    result: AnalysisResult,
    selected_type_name: Optional[str] = None,
    *,
    title: str = "SRP Insight",
    config: Optional[AnalyzerConfig] = None,
) -> str:
    """Build a complete HTML document for one analyzed class."""
    config = config or DEFAULT_CONFIG
    overlay = highlight(
        source_text,
        result,
        selected_type_name,
        unselected_opacity=config.unselected_opacity,
    )
    return _build_html(
        title=escape_html(title),
        legend=render_legend(result, selected_type_name),
        verdict=render_verdict(result),
        overlay=overlay,
    )


def render_legend(result: AnalysisResult, selected_type_name: Optional[str] = None) -> str:
    """Dependency list with color swatches and parameter/field bindings."""
    if not result.dependencies:
        return '<p class="empty">No dependencies found.</p>'

    items = []
    for dep in result.dependencies:
        if dep.parameter_name and dep.field_name:
            binding = f"Parameter: {dep.parameter_name} &rarr; Field: {dep.field_name}"
        elif dep.parameter_name:
            binding = f"Parameter: {dep.parameter_name}"
        else:
            binding = f"Field: {dep.field_name}"
        css = "dep selected" if dep.type_name == selected_type_name else "dep"
        items.append(
            f'<li class="{css}" data-dependency="{escape_html(dep.type_name)}">'
            f'<span class="swatch" style="background-color: {dep.color};"></span>'
            f'<span class="dep-type">{escape_html(dep.type_name)}</span>'
            f'<span class="dep-binding">{binding}</span></li>'
        )
    return '<ul class="legend">' + "".join(items) + "</ul>"


def render_verdict(result: AnalysisResult) -> str:
    """Warning banner with the breakdown, or the all-clear banner."""
    if not result.dependencies:
        return ""

    if not result.has_multiple_responsibilities:
        return (
            '<div class="verdict ok"><h3>Single Responsibility Maintained</h3>'
            "<p>Dependencies are used together across methods, suggesting the class "
            "has a cohesive, single responsibility.</p></div>"
        )

    groups = "".join(
        f"<li><strong>Uses {escape_html(group.dependency)}:</strong> "
        + ", ".join(f"<code>{escape_html(m)}</code>" for m in group.methods)
        + "</li>"
        for group in result.responsibility_groups
    )
    mixed = ""
    if result.mixed_methods:
        mixed = (
            "<p>Methods mixing responsibilities:</p><ul>"
            + "".join(f"<li><code>{escape_html(m)}</code></li>" for m in result.mixed_methods)
            + "</ul>"
        )
    return (
        '<div class="verdict warn"><h3>Potential SRP Violation Detected</h3>'
        "<p>This class appears to have multiple responsibilities. Each dependency is used "
        "in different methods, suggesting the class handles multiple concerns. Consider "
        "splitting into smaller, focused classes.</p>"
        f"<p>Responsibility breakdown:</p><ul>{groups}</ul>{mixed}</div>"
    )


def _build_html(title: str, legend: str, verdict: str, overlay: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
* {{ box-sizing: border-box; }}
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; margin: 0; background: #f9fafb; color: #111827; }}
header {{ padding: 20px 32px; border-bottom: 1px solid #e5e7eb; background: #fff; }}
header h1 {{ font-size: 22px; margin: 0; }}
main {{ display: grid; grid-template-columns: 2fr 1fr; gap: 24px; padding: 24px 32px; }}
pre.code {{ background: #fff; border: 1px solid #e5e7eb; border-radius: 10px; padding: 16px; font-size: 13px; white-space: pre-wrap; overflow: auto; }}
.srp-highlight {{ padding: 0 2px; border-radius: 2px; }}
.mixed-responsibility {{ padding: 0 2px; border-radius: 2px; cursor: help; }}
.legend {{ list-style: none; padding: 0; margin: 0; }}
.dep {{ display: flex; gap: 10px; align-items: center; padding: 10px; border: 1px solid #e5e7eb; border-radius: 8px; margin-bottom: 8px; background: #fff; }}
.dep.selected {{ outline: 2px solid #111827; }}
.swatch {{ width: 14px; height: 14px; border-radius: 3px; flex-shrink: 0; }}
.dep-type {{ font-family: monospace; font-weight: 600; }}
.dep-binding {{ font-size: 12px; color: #6b7280; }}
.verdict {{ border-radius: 10px; padding: 12px 16px; margin-top: 16px; font-size: 14px; }}
.verdict.warn {{ background: #fffbeb; border: 1px solid #fcd34d; color: #78350f; }}
.verdict.ok {{ background: #f0fdf4; border: 1px solid #86efac; color: #14532d; }}
.verdict h3 {{ margin: 0 0 6px 0; font-size: 14px; }}
.empty {{ color: #6b7280; }}
</style>
</head>
<body>
<header><h1>{title}</h1></header>
<main>
<section>
<pre class="code">{overlay}</pre>
{verdict}
</section>
<aside>
<h2>Dependencies</h2>
{legend}
</aside>
</main>
</body>
</html>
"""
