"""Exceptions raised while parsing, extracting and range-checking versions."""

from __future__ import annotations

from typing import Any

TOO_FEW_SEGMENTS_MESSAGE = "version string has too few segments: {}"
TOO_MANY_SEGMENTS_MESSAGE = "version string has too many segments: {}"


class StackGuardError(Exception):
    """Base exception for all stack-guard errors.

    ``details`` carries the structured context (raw strings, bounds, label
    names) so callers can report without re-parsing the message.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class InvalidVersionError(StackGuardError, ValueError):
    """Raised when a string is not of the form M.N.P[-label]."""

    def __init__(self, message: str, version: str):
        super().__init__(message, {"version": version})
        self.version = version


class TooFewSegmentsError(InvalidVersionError):
    def __init__(self, version: str):
        super().__init__(TOO_FEW_SEGMENTS_MESSAGE.format(version), version)


class TooManySegmentsError(InvalidVersionError):
    def __init__(self, version: str):
        super().__init__(TOO_MANY_SEGMENTS_MESSAGE.format(version), version)


class MissingLabelError(StackGuardError):
    """Raised when the version label is absent from a label mapping."""

    def __init__(self, label_name: str):
        super().__init__(
            f"version label {label_name} is missing",
            {"label_name": label_name},
        )
        self.label_name = label_name


class InvalidLabelError(StackGuardError):
    """Raised when the version label is present but does not parse.

    The parse error is available as ``__cause__``.
    """

    def __init__(self, label_name: str, label_value: str, reason: str = ""):
        message = f"version label {label_name} is invalid: {label_value}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            {"label_name": label_name, "label_value": label_value},
        )
        self.label_name = label_name
        self.label_value = label_value


class VersionRangeError(StackGuardError):
    """Raised when a version falls outside a supported range."""

    def __init__(self, message: str, version: Any, bound: Any):
        super().__init__(message, {"version": str(version), "bound": str(bound)})
        self.version = version
        self.bound = bound


class BelowMinimumError(VersionRangeError):
    def __init__(self, version: Any, bound: Any):
        super().__init__(
            f"version {version} is lower than the lowest supported version of {bound}",
            version,
            bound,
        )


class AboveMaximumError(VersionRangeError):
    def __init__(self, version: Any, bound: Any):
        super().__init__(
            f"version {version} is higher than the highest supported version of {bound}",
            version,
            bound,
        )
