"""
Logging for SRP Insight.

Every module logs under the ``srp_insight`` namespace, one logger per
stage, so a single stage can be turned up on its own:

    srp_insight.analysis.dependencies   constructor and field discovery
    srp_insight.analysis.usages         method spans and identifier hits
    srp_insight.api                     per-class verdict summary
    srp_insight.server.app              browser shell requests
    srp_insight.cli.analyze             per-file progress

Terminal output goes through rich on stderr so it never mixes with JSON
or HTML written to stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "srp_insight"

# AnalyzerConfig.verbosity -> logging level
VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route analyzer logs to a rich stderr handler and, optionally, a file.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
        log_file: Append plain-text records here as well

    Returns:
        The ``srp_insight`` logger
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Log messages carry C# snippets; brackets are not rich markup
            markup=False,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a stage, namespaced under ``srp_insight``.

    Modules pass ``__name__``; short names such as ``"analysis.usages"``
    are prefixed.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
