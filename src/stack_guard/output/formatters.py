"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from stack_guard.models import ComponentFamily
from stack_guard.models.report import CompatReport
from stack_guard.models.version import MinMaxVersion, Version

console = Console()


def version_to_dict(v: Version) -> dict[str, Any]:
    return {
        "version": str(v),
        "major": v.major,
        "minor": v.minor,
        "patch": v.patch,
        "label": v.label,
    }


def range_to_dict(rng: MinMaxVersion) -> dict[str, str]:
    return {"min": str(rng.min), "max": str(rng.max)}


def report_to_dict(report: CompatReport) -> dict[str, Any]:
    observed = report.observed_min
    return {
        "family": report.family.value,
        "context": report.context,
        "namespace": report.namespace,
        "label": report.label_name,
        "supported": range_to_dict(report.supported),
        "observed_min": str(observed) if observed is not None else None,
        "ok": report.ok,
        "results": [
            {
                "source": r.source,
                "objects": r.object_count,
                "min_version": str(r.min_version) if r.min_version is not None else None,
                "status": r.status.value,
                "message": r.message,
            }
            for r in report.results
        ],
    }


def _emit(data: Any, fmt: str) -> bool:
    """Print ``data`` as json or yaml; return False for table output."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
        return True
    if fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return True
    return False


def output_version(raw: str, v: Version, fmt: str) -> None:
    if not _emit(version_to_dict(v), fmt):
        from stack_guard.output.tables import version_panel
        console.print(version_panel(raw, v))


def output_comparison(a: Version, b: Version, results: dict[str, bool], fmt: str) -> None:
    data = {"a": str(a), "b": str(b), **results}
    if not _emit(data, fmt):
        from stack_guard.output.tables import comparison_table
        console.print(comparison_table(a, b, results))


def output_ranges(
    ranges: dict[ComponentFamily, MinMaxVersion], fmt: str, floor: Version | None = None,
) -> None:
    data = {family.value: range_to_dict(rng) for family, rng in ranges.items()}
    if not _emit(data, fmt):
        from stack_guard.output.tables import ranges_table
        console.print(ranges_table(ranges, floor=floor))


def output_report(report: CompatReport, fmt: str) -> None:
    if not _emit(report_to_dict(report), fmt):
        from stack_guard.output.tables import report_table
        console.print(report_table(report))
        if report.ok:
            console.print("\n[green]All observed versions are supported[/green]")
        else:
            console.print("\n[red]Unsupported or unreadable versions found[/red]")
