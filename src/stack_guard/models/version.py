"""Version value type and supported-version ranges.

Versions have the form ``{major}.{minor}.{patch}[-{label}]``. The label is
kept for display only: equality, hashing and ordering look at
``(major, minor, patch)`` and nothing else. There is deliberately no
pre-release precedence.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, replace

from stack_guard.models.errors import (
    AboveMaximumError,
    BelowMinimumError,
    InvalidVersionError,
    TooFewSegmentsError,
    TooManySegmentsError,
)

# Decimal integer with optional sign, ASCII digits only.
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def _parse_int(segment: str) -> int:
    if not _INT_RE.match(segment):
        raise ValueError(f"invalid syntax: {segment!r}")
    return int(segment)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    major: int = 0
    minor: int = 0
    patch: int = 0
    label: str = ""

    def __str__(self) -> str:
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.label:
            s += f"-{self.label}"
        return s

    @classmethod
    def from_parts(cls, major: int, minor: int, patch: int) -> Version:
        """Build a version from its numeric parts, without a label."""
        return cls(major=major, minor=minor, patch=patch)

    @property
    def key(self) -> tuple[int, int, int]:
        """The ordering key; the label is not part of it."""
        return (self.major, self.minor, self.patch)

    def copy(self) -> Version:
        return replace(self)

    def with_patch(self, patch: int) -> Version:
        return replace(self, patch=patch)

    def is_same(self, other: Version) -> bool:
        """Return True if both versions have the same major, minor and patch."""
        return self.key == other.key

    def is_after(self, other: Version) -> bool:
        """Return True if this version is strictly newer than ``other``."""
        return self.key > other.key

    def is_same_or_after(self, other: Version) -> bool:
        return self.is_same(other) or self.is_after(other)

    def is_same_or_after_ignoring_patch(self, other: Version) -> bool:
        """Like is_same_or_after, comparing major and minor only."""
        return self.with_patch(0).is_same_or_after(other.with_patch(0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.is_same(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return other.is_after(self)

    def __hash__(self) -> int:
        return hash(self.key)


def parse(version: str) -> Version:
    """Parse a ``{major}.{minor}.{patch}[-{label}]`` string.

    The label is split off before dots are counted, so it may contain any
    number of dots (``1.2.3-rc.1.2``). The numeric part may have at most four
    dot-separated parts: a fourth one ends up in the patch segment and is
    rejected there (``1.2.3.4``), a fifth is too many (``1.2.3.4.5``).
    """
    segments = version.split(".", 2)
    if len(segments) < 3:
        raise TooFewSegmentsError(version)

    patch_segments = segments[2].split("-", 1)
    if patch_segments[0].count(".") > 1:
        raise TooManySegmentsError(version)

    try:
        major = _parse_int(segments[0])
    except ValueError as e:
        raise InvalidVersionError(f"invalid major format. version: {version}: {e}", version) from e

    try:
        minor = _parse_int(segments[1])
    except ValueError as e:
        raise InvalidVersionError(f"invalid minor format. version: {version}: {e}", version) from e

    try:
        patch = _parse_int(patch_segments[0])
    except ValueError as e:
        raise InvalidVersionError(f"invalid patch format. version: {version}: {e}", version) from e

    label = patch_segments[1] if len(patch_segments) == 2 else ""
    return Version(major=major, minor=minor, patch=patch, label=label)


def must_parse(version: str) -> Version:
    """Parse a version literal known to be valid.

    Only meant for hard-coded strings: an invalid one is a programming error
    and raises AssertionError.
    """
    try:
        return parse(version)
    except InvalidVersionError as e:
        raise AssertionError(f"invalid version literal {version!r}: {e}") from e


@dataclass(frozen=True)
class MinMaxVersion:
    """Inclusive range of supported versions.

    ``min <= max`` is expected but not enforced.
    """

    min: Version
    max: Version

    def within_range(self, v: Version) -> None:
        """Raise a VersionRangeError if ``v`` is outside ``[min, max]``."""
        if not v.is_same_or_after(self.min):
            raise BelowMinimumError(v, self.min)
        if not self.max.is_same_or_after(v):
            raise AboveMaximumError(v, self.max)

    def with_min(self, new_min: Version) -> MinMaxVersion:
        """Return a range whose floor is raised to ``new_min`` if it is higher.

        The floor is never lowered.
        """
        if new_min.is_after(self.min):
            return MinMaxVersion(min=new_min, max=self.max)
        return self

    def __contains__(self, v: object) -> bool:
        if not isinstance(v, Version):
            return False
        return v.is_same_or_after(self.min) and self.max.is_same_or_after(v)

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"
