"""Read versions out of Kubernetes object labels and reduce them to a minimum."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from stack_guard.models.errors import InvalidLabelError, InvalidVersionError, MissingLabelError
from stack_guard.models.version import Version, parse

logger = logging.getLogger(__name__)


def from_labels(labels: Mapping[str, str] | None, label_name: str) -> Version:
    """Parse the version stored under ``label_name``."""
    labels = labels or {}
    if label_name not in labels:
        raise MissingLabelError(label_name)
    value = labels[label_name]
    try:
        return parse(value)
    except InvalidVersionError as e:
        logger.debug("Label %s has unparseable value %r", label_name, value)
        raise InvalidLabelError(label_name, value, reason=str(e)) from e


def min_version(versions: list[Version]) -> Version | None:
    """Return the lowest version, or None if there is none.

    ``versions`` is sorted in place. The sort is stable, so among versions
    that only differ by label the first one given wins.
    """
    versions.sort(key=lambda v: v.key)
    if not versions:
        return None
    return versions[0]


def _pod_labels(pod: Any) -> Mapping[str, str] | None:
    metadata = getattr(pod, "metadata", None)
    return metadata.labels if metadata else None


def _template_labels(sset: Any) -> Mapping[str, str] | None:
    spec = getattr(sset, "spec", None)
    template = spec.template if spec else None
    metadata = template.metadata if template else None
    return metadata.labels if metadata else None


def min_in_pods(pods: Iterable[Any], label_name: str) -> Version | None:
    """Return the lowest version found in the labels of the given Pods."""
    versions = [from_labels(_pod_labels(p), label_name) for p in pods]
    return min_version(versions)


def min_in_stateful_sets(ssets: Iterable[Any], label_name: str) -> Version | None:
    """Return the lowest version found in the pod template labels of the given StatefulSets."""
    versions = [from_labels(_template_labels(s), label_name) for s in ssets]
    return min_version(versions)
