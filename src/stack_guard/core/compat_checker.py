"""Check the versions running in a cluster against a family's supported range."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from stack_guard.core.k8s_client import K8sClient
from stack_guard.core.labels import min_in_pods, min_in_stateful_sets
from stack_guard.core.supported import supported_range
from stack_guard.models import ComponentFamily
from stack_guard.models.errors import (
    AboveMaximumError,
    BelowMinimumError,
    InvalidLabelError,
    MissingLabelError,
)
from stack_guard.models.report import CheckStatus, CompatReport, SourceResult
from stack_guard.models.version import MinMaxVersion, Version

logger = logging.getLogger(__name__)

Reducer = Callable[[list[Any], str], Optional[Version]]


def check_workloads(
    k8s: K8sClient,
    family: ComponentFamily,
    label_name: str,
    namespace: str | None = None,
    label_selector: str | None = None,
    floor: Version | None = None,
) -> CompatReport:
    """Build a compatibility report for the Pods and StatefulSets of a family.

    Version and range errors end up in the report. Kubernetes API errors
    propagate.
    """
    rng = supported_range(family, floor)
    report = CompatReport(
        family=family,
        supported=rng,
        label_name=label_name,
        context=k8s.active_context_name,
        namespace=namespace or "",
    )

    pods = k8s.list_pods(namespace=namespace, label_selector=label_selector)
    report.results.append(_evaluate("pods", pods, min_in_pods, label_name, rng))

    ssets = k8s.list_stateful_sets(namespace=namespace, label_selector=label_selector)
    report.results.append(_evaluate("statefulsets", ssets, min_in_stateful_sets, label_name, rng))

    return report


def _evaluate(
    source: str,
    objects: list[Any],
    reducer: Reducer,
    label_name: str,
    rng: MinMaxVersion,
) -> SourceResult:
    try:
        lowest = reducer(objects, label_name)
    except (MissingLabelError, InvalidLabelError) as e:
        logger.debug("Could not read versions from %s", source, exc_info=True)
        return SourceResult(source, len(objects), CheckStatus.INVALID_LABEL, message=str(e))

    if lowest is None:
        return SourceResult(source, 0, CheckStatus.NOT_FOUND, message=f"no {source} found")

    try:
        rng.within_range(lowest)
    except BelowMinimumError as e:
        return SourceResult(source, len(objects), CheckStatus.BELOW_MIN, lowest, str(e))
    except AboveMaximumError as e:
        return SourceResult(source, len(objects), CheckStatus.ABOVE_MAX, lowest, str(e))
    return SourceResult(source, len(objects), CheckStatus.OK, lowest)
