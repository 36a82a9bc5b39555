"""Shared CLI options."""

from __future__ import annotations

import typer

from stack_guard.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
NamespaceOption = typer.Option(None, "--namespace", "-n", help="Kubernetes namespace (default: all)")
ContextOption = typer.Option(None, "--context", help="Kubernetes context name")
MinVersionOption = typer.Option(
    None, "--min-version", help="Global minimum version (default: STACK_GUARD_GLOBAL_MIN_VERSION)",
)
