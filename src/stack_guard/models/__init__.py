"""Data models for Stack Guard."""

from __future__ import annotations

import enum


class ComponentFamily(enum.Enum):
    APM_SERVER = "apm-server"
    ENTERPRISE_SEARCH = "enterprise-search"
    KIBANA = "kibana"
    BEAT = "beat"
    AGENT = "agent"

    @classmethod
    def from_str(cls, s: str) -> ComponentFamily:
        for member in cls:
            if member.value == s.lower():
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown component family {s!r}, expected one of: {choices}")
