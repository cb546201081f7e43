"""``srp-insight serve``: browser shell around the analyzer."""

import threading
import webbrowser
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import SrpInsightError
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def serve(
    port: int = typer.Option(8765, help="Port to listen on"),
    host: str = typer.Option("127.0.0.1", help="Host to bind to"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Don't open browser"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Start a local page where classes can be pasted and analyzed."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app

    try:
        settings = resolve_config(config=config, verbose=verbose)
    except SrpInsightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    url = f"http://{host}:{port}"
    if not no_browser:
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()

    console.print(f"[bold]SRP Insight[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level="debug" if verbose else "warning",
    )
