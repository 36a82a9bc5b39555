"""stack-guard ranges - List supported version ranges."""

from __future__ import annotations

from typing import Optional

import typer

from stack_guard.cli.errors import resolve_floor
from stack_guard.cli.options import MinVersionOption, OutputOption
from stack_guard.core.supported import SUPPORTED_VERSIONS, supported_range
from stack_guard.models.version import Version
from stack_guard.output.formatters import output_ranges


def ranges(
    output: str = OutputOption,
    min_version: Optional[str] = MinVersionOption,
) -> None:
    """List the supported range of every component family."""
    floor = resolve_floor(min_version)
    effective = {family: supported_range(family, floor) for family in SUPPORTED_VERSIONS}
    output_ranges(effective, output, floor=floor if floor.is_after(Version()) else None)
