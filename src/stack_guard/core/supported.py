"""Supported version ranges per component family."""

from __future__ import annotations

import logging

from stack_guard.models import ComponentFamily
from stack_guard.models.version import MinMaxVersion, Version

logger = logging.getLogger(__name__)

# See https://www.elastic.co/support/matrix#matrix_compatibility
SUPPORTED_APM_SERVER_VERSIONS = MinMaxVersion(min=Version(6, 2, 0), max=Version(8, 99, 99))
SUPPORTED_ENTERPRISE_SEARCH_VERSIONS = MinMaxVersion(min=Version(7, 7, 0), max=Version(8, 99, 99))
SUPPORTED_KIBANA_VERSIONS = MinMaxVersion(min=Version(6, 8, 0), max=Version(8, 99, 99))
SUPPORTED_BEAT_VERSIONS = MinMaxVersion(min=Version(7, 0, 0), max=Version(8, 99, 99))
# Agent shipped in 7.8.0 as an experimental release with no upgrade path
# forward, so the floor is set above its introduction.
SUPPORTED_AGENT_VERSIONS = MinMaxVersion(min=Version(7, 10, 0), max=Version(8, 99, 99))

SUPPORTED_VERSIONS: dict[ComponentFamily, MinMaxVersion] = {
    ComponentFamily.APM_SERVER: SUPPORTED_APM_SERVER_VERSIONS,
    ComponentFamily.ENTERPRISE_SEARCH: SUPPORTED_ENTERPRISE_SEARCH_VERSIONS,
    ComponentFamily.KIBANA: SUPPORTED_KIBANA_VERSIONS,
    ComponentFamily.BEAT: SUPPORTED_BEAT_VERSIONS,
    ComponentFamily.AGENT: SUPPORTED_AGENT_VERSIONS,
}


def supported_range(family: ComponentFamily, floor: Version | None = None) -> MinMaxVersion:
    """Return the supported range of a family, raised by an optional global floor."""
    rng = SUPPORTED_VERSIONS[family]
    if floor is None:
        return rng
    raised = rng.with_min(floor)
    if raised is not rng:
        logger.debug("Global floor %s raises %s minimum from %s", floor, family.value, rng.min)
    return raised


def check_supported(family: ComponentFamily, version: Version, floor: Version | None = None) -> None:
    """Raise a VersionRangeError if ``version`` is not supported for ``family``."""
    supported_range(family, floor).within_range(version)
