"""stack-guard workloads <family> - Check versions running in the cluster."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from stack_guard.cli.errors import resolve_floor
from stack_guard.cli.options import ContextOption, MinVersionOption, NamespaceOption, OutputOption
from stack_guard.config.settings import settings
from stack_guard.core.compat_checker import check_workloads
from stack_guard.core.k8s_client import K8sClient
from stack_guard.models import ComponentFamily
from stack_guard.output.formatters import output_report

console = Console()


def workloads(
    family: str = typer.Argument(help="Component family: apm-server, enterprise-search, kibana, beat, agent"),
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    selector: Optional[str] = typer.Option(None, "--selector", "-l", help="Label selector for Pods and StatefulSets"),
    label: Optional[str] = typer.Option(None, "--label", help="Label holding the version (default from settings)"),
    min_version: Optional[str] = MinVersionOption,
) -> None:
    """Report the lowest running version of a family and whether it is supported."""
    try:
        fam = ComponentFamily.from_str(family)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="FAMILY") from e

    floor = resolve_floor(min_version)
    k8s = K8sClient(context=context)
    with console.status("[bold cyan]Reading workloads…"):
        report = check_workloads(
            k8s,
            fam,
            label or settings.version_label,
            namespace=namespace,
            label_selector=selector,
            floor=floor,
        )

    output_report(report, output)
    if not report.ok:
        raise typer.Exit(code=1)
