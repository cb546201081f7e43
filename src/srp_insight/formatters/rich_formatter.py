"""Rich terminal formatter for SRP Insight."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import AnalysisResult, SourceReport
from .base import BaseFormatter


def _binding_label(parameter_name: str, field_name: Optional[str]) -> str:
    if parameter_name and field_name:
        return f"{parameter_name} -> {field_name}"
    return parameter_name or field_name or ""


class RichFormatter(BaseFormatter):
    """Legend table, method usage table and verdict panel per report."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, reports: List[SourceReport]) -> None:
        for report in reports:
            self._print_report(report)

    def format(self, reports: List[SourceReport]) -> str:
        # Rich output goes directly to console; return empty string
        self.render(reports)
        return ""

    def _print_report(self, report: SourceReport) -> None:
        result = report.result
        heading = escape(report.origin)
        if result.class_name:
            heading = f"{heading} [dim]({result.class_name})[/dim]"
        self.console.print()
        self.console.print(f"[bold cyan]SRP ANALYSIS[/bold cyan] -- {heading}")

        if not result.dependencies:
            self.console.print("[yellow]No injected dependencies found.[/yellow]")
            return

        self.console.print(self._dependency_table(result))
        if result.method_usages:
            self.console.print(self._usage_table(result))
        self.console.print(self._verdict_panel(result))

    def _dependency_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Dependencies", show_header=True, pad_edge=True)
        table.add_column("", width=2)
        table.add_column("Type", style="bold")
        table.add_column("Parameter -> Field")
        table.add_column("Methods", justify="right")

        method_counts = {g.dependency: len(g.methods) for g in result.responsibility_groups}
        for dep in result.dependencies:
            table.add_row(
                Text("■", style=dep.color),
                Text(dep.type_name),
                _binding_label(dep.parameter_name, dep.field_name),
                str(method_counts.get(dep.type_name, 0)),
            )
        return table

    def _usage_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Method usage", show_header=True, pad_edge=True)
        table.add_column("Method")
        table.add_column("Dependencies")

        for usage in result.method_usages:
            used = Text()
            for dep in result.dependencies:
                if dep.type_name in usage.dependency_keys:
                    if used:
                        used.append(", ")
                    used.append(dep.type_name, style=dep.color)
            name = Text(usage.method_name, style="bold yellow" if usage.is_mixed else "")
            table.add_row(name, used)
        return table

    def _verdict_panel(self, result: AnalysisResult) -> Panel:
        if not result.has_multiple_responsibilities:
            return Panel(
                "Dependencies are used together across methods, suggesting a cohesive, "
                "single responsibility.",
                title="[bold green]Single Responsibility Maintained[/bold green]",
                border_style="green",
                expand=False,
            )

        body = Text(
            "Each dependency is used in different methods, suggesting the class handles "
            "multiple concerns. Consider splitting into smaller, focused classes.\n"
        )
        for group in result.responsibility_groups:
            body.append(f"\nUses {group.dependency}: ", style="bold")
            body.append(", ".join(group.methods))
        if result.mixed_methods:
            body.append("\n\nMethods mixing responsibilities: ", style="bold")
            body.append(", ".join(result.mixed_methods), style="yellow")
        return Panel(
            body,
            title="[bold red]Potential SRP Violation Detected[/bold red]",
            border_style="red",
            expand=False,
        )
