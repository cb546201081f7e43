"""Shared CLI helpers."""

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalyzerConfig, load_config
from ..exceptions import EmptySourceError, FileAccessError
from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)

STDIN_PATH = Path("-")


def resolve_config(
    config: Optional[Path] = None,
    keep_framework: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalyzerConfig:
    """Build configuration from CLI options and configure logging."""
    overrides = {}
    if keep_framework:
        overrides["filter_framework_types"] = False
    settings = load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
    setup_logging(settings.verbosity)
    return settings


def read_source(path: Path) -> str:
    """Read a source file (``-`` for stdin), rejecting blank input.

    Raises:
        FileAccessError: If the file cannot be read
        EmptySourceError: If the content is blank or whitespace-only
    """
    if path == STDIN_PATH:
        text = sys.stdin.read()
        origin = "<stdin>"
    else:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(path, str(e))
        origin = str(path)

    if not text.strip():
        raise EmptySourceError(origin)
    return text


def origin_label(path: Path) -> str:
    return "<stdin>" if path == STDIN_PATH else str(path)
