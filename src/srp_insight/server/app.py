"""Starlette ASGI application for the browser shell.

The shell owns everything the core does not: it accepts pasted source,
short-circuits blank input, calls ``analyze`` then ``highlight`` and hands
the escaped markup back for display.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from ..api import analyze, highlight
from ..config import DEFAULT_CONFIG, AnalyzerConfig
from ..exceptions import SourceTooLargeError
from ..logging_config import get_logger

logger = get_logger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Cache template HTML at first request
_TEMPLATE_HTML: str | None = None


def _get_html() -> str:
    """Load the page template (cached after first read)."""
    global _TEMPLATE_HTML  # noqa: PLW0603
    if _TEMPLATE_HTML is None:
        _TEMPLATE_HTML = (_TEMPLATE_DIR / "index.html").read_text(encoding="utf-8")
    return _TEMPLATE_HTML


def _bad_request(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(config: Optional[AnalyzerConfig] = None) -> Starlette:
    """Build the Starlette application.

    Args:
        config: Analyzer configuration shared by every request
    """
    config = config or DEFAULT_CONFIG

    async def homepage(request: Request) -> HTMLResponse:
        return HTMLResponse(_get_html())

    async def api_palette(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "palette": list(config.palette),
                "framework_types": list(config.framework_types),
                "filter_framework_types": config.filter_framework_types,
            }
        )

    async def api_analyze(request: Request) -> JSONResponse:
        """Analyze pasted source. POST /api/analyze"""
        try:
            payload: Any = await request.json()
        except ValueError:
            # Malformed JSON or a body that is not UTF-8
            return _bad_request("Request body must be JSON")
        if not isinstance(payload, dict):
            return _bad_request("Request body must be a JSON object")

        source = payload.get("source")
        if not isinstance(source, str):
            return _bad_request("'source' must be a string")
        if not source.strip():
            return _bad_request("'source' is empty")

        filter_framework = payload.get("filter_framework_types", config.filter_framework_types)
        if not isinstance(filter_framework, bool):
            return _bad_request("'filter_framework_types' must be a boolean")

        selected = payload.get("selected")
        if selected is not None and not isinstance(selected, str):
            return _bad_request("'selected' must be a string or null")

        try:
            result = analyze(source, filter_framework, config=config)
        except SourceTooLargeError as e:
            return JSONResponse(e.to_dict(), status_code=413)

        if selected is not None and result.dependency(selected) is None:
            selected = None

        logger.debug(
            "Analyzed %d chars: %d dependencies", len(source), len(result.dependencies)
        )
        return JSONResponse(
            {
                "result": result.to_dict(),
                "selected": selected,
                "html": highlight(source, result, selected, config=config),
            }
        )

    routes = [
        Route("/", homepage),
        Route("/api/palette", api_palette),
        Route("/api/analyze", api_analyze, methods=["POST"]),
    ]

    return Starlette(routes=routes)
