"""stack-guard check <family> <version> - Check a version against a supported range."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from stack_guard.cli.errors import fail, parse_or_exit, resolve_floor
from stack_guard.cli.options import MinVersionOption
from stack_guard.core.supported import supported_range
from stack_guard.models import ComponentFamily
from stack_guard.models.errors import VersionRangeError

console = Console()


def check(
    family: str = typer.Argument(help="Component family: apm-server, enterprise-search, kibana, beat, agent"),
    version: str = typer.Argument(help="Version to check"),
    min_version: Optional[str] = MinVersionOption,
) -> None:
    """Check whether a version is supported for a component family."""
    try:
        fam = ComponentFamily.from_str(family)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="FAMILY") from e

    v = parse_or_exit(version)
    rng = supported_range(fam, resolve_floor(min_version))
    try:
        rng.within_range(v)
    except VersionRangeError as e:
        fail(e)
    console.print(f"[green]{escape(str(v))} is supported for {fam.value} {rng}[/green]")
