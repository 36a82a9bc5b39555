"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from stack_guard.models.version import Version, parse

DEFAULT_VERSION_LABEL = "common.k8s.elastic.co/version"


def _default_version_label() -> str:
    return os.environ.get("STACK_GUARD_VERSION_LABEL", "") or DEFAULT_VERSION_LABEL


def _default_global_min_version() -> str:
    return os.environ.get("STACK_GUARD_GLOBAL_MIN_VERSION", "").strip()


@dataclass
class Settings:
    version_label: str = field(default_factory=_default_version_label)
    global_min_version_raw: str = field(default_factory=_default_global_min_version)
    default_output: str = "table"  # "table", "json" or "yaml"
    request_timeout: int = 30

    @property
    def global_min_version(self) -> Version:
        """Deployment-wide floor applied on top of every family range.

        Unset means no extra floor (0.0.0). An invalid value raises
        InvalidVersionError.
        """
        if not self.global_min_version_raw:
            return Version()
        return parse(self.global_min_version_raw)


# Global singleton
settings = Settings()
