"""``srp-insight highlight``: print the colorized markup overlay."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import analyze as analyze_source
from ..api import highlight as highlight_source
from ..exceptions import SrpInsightError
from ..report import render_page
from . import app
from ._common import err_console, origin_label, read_source, resolve_config


@app.command()
def highlight(
    path: Path = typer.Argument(
        ...,
        help="C# source file ('-' reads stdin)",
        dir_okay=False,
    ),
    select: Optional[str] = typer.Option(
        None,
        "--select",
        "-s",
        help="Highlight only this dependency type",
    ),
    page: bool = typer.Option(
        False,
        "--page",
        help="Wrap the overlay in a standalone HTML page with legend and verdict",
    ),
    keep_framework: bool = typer.Option(
        False,
        "--keep-framework",
        help="Keep framework services (ILogger, IOptions, ...) in the dependency list",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write markup to a file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """
    Print escaped HTML markup with each dependency's usage colorized.

    [bold cyan]Examples:[/bold cyan]

      srp-insight highlight Processor.cs --select IOrderService

      srp-insight highlight Processor.cs --page -o processor.html
    """
    try:
        settings = resolve_config(config, keep_framework, verbose)
        source = read_source(path)
        result = analyze_source(source, config=settings)
    except SrpInsightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if select is not None and result.dependency(select) is None:
        known = ", ".join(result.dependency_types) or "none"
        err_console.print(
            f"[yellow]Unknown dependency {escape(repr(select))}[/yellow] (found: {escape(known)})"
        )

    if page:
        markup = render_page(
            source, result, select, title=f"SRP Insight: {origin_label(path)}", config=settings
        )
    else:
        markup = highlight_source(source, result, select, config=settings)

    if output is None:
        typer.echo(markup)
    else:
        output.write_text(markup, encoding="utf-8")
        err_console.print(f"[green]Wrote[/green] {output}")
