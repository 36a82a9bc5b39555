"""Error reporting helpers shared by commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from stack_guard.config.settings import settings
from stack_guard.models.errors import StackGuardError
from stack_guard.models.version import Version, parse

err_console = Console(stderr=True)


def fail(err: StackGuardError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(err))}")
    raise typer.Exit(code=1)


def parse_or_exit(raw: str) -> Version:
    try:
        return parse(raw)
    except StackGuardError as e:
        fail(e)


def resolve_floor(raw: str | None) -> Version:
    """Return the global minimum version from the option, falling back to settings."""
    try:
        if raw:
            return parse(raw)
        return settings.global_min_version
    except StackGuardError as e:
        fail(e)
