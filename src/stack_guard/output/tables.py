"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stack_guard.models import ComponentFamily
from stack_guard.models.report import CompatReport
from stack_guard.models.version import MinMaxVersion, Version
from stack_guard.output.themes import styled_bool, styled_status


def version_panel(raw: str, v: Version) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Input", escape(raw))
    table.add_row("Major", str(v.major))
    table.add_row("Minor", str(v.minor))
    table.add_row("Patch", str(v.patch))
    table.add_row("Label", escape(v.label) or "-")
    table.add_row("Canonical", escape(str(v)))
    return Panel(table, title=f"[bold]{escape(str(v))}[/bold]", border_style="cyan")


def comparison_table(a: Version, b: Version, results: dict[str, bool]) -> Table:
    table = Table(title=f"{a} vs {b}", expand=False)
    table.add_column("Predicate", style="cyan", no_wrap=True)
    table.add_column("Result", no_wrap=True)
    for name, value in results.items():
        table.add_row(name, styled_bool(value))
    return table


def ranges_table(ranges: dict[ComponentFamily, MinMaxVersion], floor: Version | None = None) -> Table:
    title = "Supported Versions"
    if floor is not None:
        title += f" (global minimum {floor})"
    table = Table(title=title, expand=True)
    table.add_column("Family", style="magenta", no_wrap=True)
    table.add_column("Min", style="bold")
    table.add_column("Max", style="bold")
    for family, rng in ranges.items():
        table.add_row(family.value, str(rng.min), str(rng.max))
    return table


def report_table(report: CompatReport) -> Table:
    title = f"{report.family.value} compatibility {report.supported}"
    table = Table(title=title, expand=True)
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Objects", justify="right", style="dim")
    table.add_column("Min Version", style="bold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Message", max_width=60)

    for r in report.results:
        table.add_row(
            r.source,
            str(r.object_count),
            str(r.min_version) if r.min_version is not None else "-",
            styled_status(r.status),
            escape(r.message),
        )
    return table
