"""Check status color map."""

from stack_guard.models.report import CheckStatus

STATUS_COLORS: dict[CheckStatus, str] = {
    CheckStatus.OK: "green",
    CheckStatus.BELOW_MIN: "red bold",
    CheckStatus.ABOVE_MAX: "red bold",
    CheckStatus.INVALID_LABEL: "yellow",
    CheckStatus.NOT_FOUND: "dim",
}


def styled_status(status: CheckStatus) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status.value}[/{color}]"


def styled_bool(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"
