"""CLI entry point - registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="srp-insight",
    help="SRP Insight - dependency and responsibility analysis for C# classes",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"srp-insight {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """SRP Insight - dependency and responsibility analysis for C# classes."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .highlight import highlight as _highlight  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402
