"""Browser shell: a local page to paste a class and see the overlay.

``srp-insight serve`` runs ``server.app.create_app`` under uvicorn. Both
live in the optional ``[serve]`` extra::

    pip install srp-insight[serve]
"""

from __future__ import annotations

from importlib.util import find_spec

SERVE_REQUIREMENTS = ("starlette", "uvicorn")


def _check_deps() -> None:
    """Raise ImportError naming every ``[serve]`` package that is not installed."""
    missing = [name for name in SERVE_REQUIREMENTS if find_spec(name) is None]
    if missing:
        raise ImportError(
            f"The browser shell needs {', '.join(missing)}. "
            "Install with: pip install srp-insight[serve]"
        )
