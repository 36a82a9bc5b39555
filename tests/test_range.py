"""Tests for supported-version ranges and the global floor."""

import pytest

from stack_guard.core.supported import (
    SUPPORTED_AGENT_VERSIONS,
    SUPPORTED_KIBANA_VERSIONS,
    SUPPORTED_VERSIONS,
    check_supported,
    supported_range,
)
from stack_guard.models import ComponentFamily
from stack_guard.models.errors import AboveMaximumError, BelowMinimumError, VersionRangeError
from stack_guard.models.version import MinMaxVersion, Version

RANGE = MinMaxVersion(min=Version(7, 0, 0), max=Version(8, 99, 99))


def test_within_range_accepts_versions_inside_bounds():
    RANGE.within_range(Version(7, 5, 0))
    RANGE.within_range(Version(7, 0, 0))
    RANGE.within_range(Version(8, 99, 99, "SNAPSHOT"))


def test_within_range_rejects_lower_version():
    with pytest.raises(BelowMinimumError, match="lower than the lowest supported version of 7.0.0") as exc_info:
        RANGE.within_range(Version(6, 9, 0))
    assert exc_info.value.version == Version(6, 9, 0)
    assert exc_info.value.bound == Version(7, 0, 0)
    assert exc_info.value.details == {"version": "6.9.0", "bound": "7.0.0"}


def test_within_range_rejects_higher_version():
    with pytest.raises(AboveMaximumError, match="higher than the highest supported version of 8.99.99"):
        RANGE.within_range(Version(9, 0, 0))


def test_min_check_runs_first_on_inverted_range():
    inverted = MinMaxVersion(min=Version(9, 0, 0), max=Version(1, 0, 0))
    with pytest.raises(BelowMinimumError):
        inverted.within_range(Version(5, 0, 0))


def test_contains():
    assert Version(7, 5, 0) in RANGE
    assert Version(6, 9, 0) not in RANGE
    assert Version(9, 0, 0) not in RANGE
    assert "7.5.0" not in RANGE


def test_with_min_never_lowers_the_floor():
    assert RANGE.with_min(Version(6, 0, 0)) is RANGE
    assert RANGE.with_min(Version(7, 0, 0, "beta")) is RANGE


def test_with_min_raises_the_floor():
    raised = RANGE.with_min(Version(7, 5, 0))

    assert raised.min == Version(7, 5, 0)
    assert raised.max == RANGE.max
    assert RANGE.min == Version(7, 0, 0)


def test_every_family_has_a_range():
    assert set(SUPPORTED_VERSIONS) == set(ComponentFamily)
    for rng in SUPPORTED_VERSIONS.values():
        assert rng.max == Version(8, 99, 99)
        assert rng.max.is_after(rng.min)


def test_agent_floor_is_above_its_introduction():
    assert SUPPORTED_AGENT_VERSIONS.min == Version(7, 10, 0)
    assert Version(7, 8, 0) not in SUPPORTED_AGENT_VERSIONS


def test_supported_range_without_floor_is_the_family_range():
    assert supported_range(ComponentFamily.KIBANA) is SUPPORTED_KIBANA_VERSIONS
    assert supported_range(ComponentFamily.KIBANA, Version()) is SUPPORTED_KIBANA_VERSIONS


def test_supported_range_applies_global_floor():
    assert supported_range(ComponentFamily.KIBANA, Version(7, 17, 0)).min == Version(7, 17, 0)
    assert supported_range(ComponentFamily.AGENT, Version(7, 0, 0)).min == Version(7, 10, 0)


def test_check_supported():
    check_supported(ComponentFamily.BEAT, Version(7, 0, 0))
    with pytest.raises(VersionRangeError):
        check_supported(ComponentFamily.BEAT, Version(7, 0, 0), floor=Version(7, 1, 0))
    with pytest.raises(BelowMinimumError):
        check_supported(ComponentFamily.ENTERPRISE_SEARCH, Version(7, 6, 9))


def test_component_family_from_str():
    assert ComponentFamily.from_str("apm-server") is ComponentFamily.APM_SERVER
    assert ComponentFamily.from_str("Kibana") is ComponentFamily.KIBANA
    with pytest.raises(ValueError, match="unknown component family"):
        ComponentFamily.from_str("logstash")
