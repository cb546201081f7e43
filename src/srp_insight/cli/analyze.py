"""``srp-insight analyze``: analyze one or more class files."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..api import analyze as analyze_source
from ..exceptions import EmptySourceError, SrpInsightError
from ..formatters import HtmlFormatter, JsonFormatter, RichFormatter
from ..logging_config import get_logger
from ..models import SourceReport
from . import app
from ._common import console, err_console, origin_label, read_source, resolve_config

logger = get_logger(__name__)

_FORMATS = ("rich", "json", "html")


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        ...,
        help="C# source files to analyze ('-' reads stdin)",
        dir_okay=False,
    ),
    keep_framework: bool = typer.Option(
        False,
        "--keep-framework",
        help="Keep framework services (ILogger, IOptions, ...) in the dependency list",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default), json, html",
    ),
    select: Optional[str] = typer.Option(
        None,
        "--select",
        "-s",
        help="Focus the html overlay on one dependency type",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write output to a file instead of stdout",
        dir_okay=False,
    ),
    fail_on_violation: bool = typer.Option(
        False,
        "--fail-on-violation",
        help="Exit 2 if any class looks like it has multiple responsibilities (for CI gating)",
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
) -> None:
    """
    Analyze C# classes for Single Responsibility Principle violations.

    [bold cyan]Examples:[/bold cyan]

      srp-insight analyze OrderController.cs

      srp-insight analyze src/Services/*.cs --format json

      cat Processor.cs | srp-insight analyze - --format html -o report.html
    """
    if fmt not in _FORMATS:
        err_console.print(f"[red]Unknown format {fmt!r}. Choose from: {', '.join(_FORMATS)}[/red]")
        raise typer.Exit(1)

    try:
        settings = resolve_config(config, keep_framework, verbose, quiet)
    except SrpInsightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    reports: list[SourceReport] = []
    failed = False
    for path in paths:
        try:
            source = read_source(path)
            result = analyze_source(source, config=settings)
        except EmptySourceError as e:
            err_console.print(f"[yellow]Skipped:[/yellow] {escape(e.message)}")
            continue
        except SrpInsightError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            failed = True
            continue
        logger.debug("Analyzed %s", origin_label(path))
        reports.append(SourceReport(origin_label(path), source, result, select))

    if fmt == "rich":
        if output is None:
            RichFormatter(console).render(reports)
        else:
            with output.open("w", encoding="utf-8") as handle:
                RichFormatter(Console(file=handle, no_color=True, width=120)).render(reports)
    else:
        formatter = HtmlFormatter(settings) if fmt == "html" else JsonFormatter()
        text = formatter.format(reports)
        if output is None:
            typer.echo(text)
        else:
            output.write_text(text, encoding="utf-8")
    if output is not None:
        err_console.print(f"[green]Wrote[/green] {output}")

    if failed:
        raise typer.Exit(1)
    if fail_on_violation and any(r.result.has_multiple_responsibilities for r in reports):
        raise typer.Exit(2)
