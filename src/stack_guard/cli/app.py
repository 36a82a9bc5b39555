"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

app = typer.Typer(
    name="stack-guard",
    help="Stack Guard - Check workload versions against supported ranges.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )


def _register_commands() -> None:
    from stack_guard.cli.commands.parse_cmd import parse_version
    from stack_guard.cli.commands.compare_cmd import compare
    from stack_guard.cli.commands.check_cmd import check
    from stack_guard.cli.commands.ranges_cmd import ranges
    from stack_guard.cli.commands.workloads_cmd import workloads

    app.command("parse", help="Parse a version string")(parse_version)
    app.command("compare", help="Compare two versions")(compare)
    app.command("check", help="Check a version against a supported range")(check)
    app.command("ranges", help="List supported version ranges")(ranges)
    app.command("workloads", help="Check versions running in the cluster")(workloads)


_register_commands()


def main() -> None:
    app()
