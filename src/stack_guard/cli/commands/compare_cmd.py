"""stack-guard compare <a> <b> - Compare two versions."""

from __future__ import annotations

import typer

from stack_guard.cli.errors import parse_or_exit
from stack_guard.cli.options import OutputOption
from stack_guard.output.formatters import output_comparison


def compare(
    a: str = typer.Argument(help="First version"),
    b: str = typer.Argument(help="Second version"),
    output: str = OutputOption,
) -> None:
    """Compare two versions. Labels are ignored."""
    va = parse_or_exit(a)
    vb = parse_or_exit(b)
    results = {
        "same": va.is_same(vb),
        "after": va.is_after(vb),
        "same_or_after": va.is_same_or_after(vb),
        "same_or_after_ignoring_patch": va.is_same_or_after_ignoring_patch(vb),
    }
    output_comparison(va, vb, results, output)
