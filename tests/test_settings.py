"""Tests for environment-backed settings."""

import pytest

from stack_guard.config.settings import DEFAULT_VERSION_LABEL, Settings
from stack_guard.models.errors import InvalidVersionError
from stack_guard.models.version import Version


def test_defaults(monkeypatch):
    monkeypatch.delenv("STACK_GUARD_VERSION_LABEL", raising=False)
    monkeypatch.delenv("STACK_GUARD_GLOBAL_MIN_VERSION", raising=False)

    s = Settings()

    assert s.version_label == DEFAULT_VERSION_LABEL
    assert s.global_min_version == Version(0, 0, 0)
    assert s.default_output == "table"
    assert s.request_timeout == 30


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("STACK_GUARD_VERSION_LABEL", "example.com/version")
    monkeypatch.setenv("STACK_GUARD_GLOBAL_MIN_VERSION", " 7.17.0 ")

    s = Settings()

    assert s.version_label == "example.com/version"
    assert s.global_min_version == Version(7, 17, 0)


def test_invalid_global_min_version_raises_on_read(monkeypatch):
    monkeypatch.setenv("STACK_GUARD_GLOBAL_MIN_VERSION", "7.17")

    s = Settings()

    with pytest.raises(InvalidVersionError):
        s.global_min_version
