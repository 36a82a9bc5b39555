"""Workload compatibility report models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from stack_guard.models import ComponentFamily
from stack_guard.models.version import MinMaxVersion, Version


class CheckStatus(enum.Enum):
    OK = "ok"
    BELOW_MIN = "below-min"
    ABOVE_MAX = "above-max"
    INVALID_LABEL = "invalid-label"
    NOT_FOUND = "not-found"


@dataclass
class SourceResult:
    source: str  # "pods" or "statefulsets"
    object_count: int
    status: CheckStatus
    min_version: Version | None = None
    message: str = ""

    @property
    def is_compatible(self) -> bool:
        return self.status in (CheckStatus.OK, CheckStatus.NOT_FOUND)


@dataclass
class CompatReport:
    family: ComponentFamily
    supported: MinMaxVersion
    label_name: str
    context: str = ""
    namespace: str = ""
    results: list[SourceResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.is_compatible for r in self.results)

    @property
    def observed_min(self) -> Version | None:
        found = [r.min_version for r in self.results if r.min_version is not None]
        if not found:
            return None
        return min(found)
