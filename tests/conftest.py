"""Shared fixtures: Kubernetes model builders and a fake cluster client."""

from __future__ import annotations

from typing import Any

import pytest
from kubernetes.client import (
    V1LabelSelector,
    V1ObjectMeta,
    V1Pod,
    V1PodTemplateSpec,
    V1StatefulSet,
    V1StatefulSetSpec,
)

from stack_guard.config.settings import DEFAULT_VERSION_LABEL

VERSION_LABEL = DEFAULT_VERSION_LABEL


def build_pod(version: str | None, name: str = "pod", label: str = VERSION_LABEL) -> V1Pod:
    labels = {"app": name}
    if version is not None:
        labels[label] = version
    return V1Pod(metadata=V1ObjectMeta(name=name, labels=labels))


def build_stateful_set(version: str | None, name: str = "sset", label: str = VERSION_LABEL) -> V1StatefulSet:
    labels = {"app": name}
    if version is not None:
        labels[label] = version
    return V1StatefulSet(
        metadata=V1ObjectMeta(name=name),
        spec=V1StatefulSetSpec(
            selector=V1LabelSelector(match_labels={"app": name}),
            service_name=name,
            template=V1PodTemplateSpec(metadata=V1ObjectMeta(labels=labels)),
        ),
    )


class FakeK8sClient:
    """Stands in for K8sClient; records the list calls it receives."""

    def __init__(self, pods: list[Any] | None = None, ssets: list[Any] | None = None):
        self.pods = pods or []
        self.ssets = ssets or []
        self.calls: list[tuple[str, str | None, str | None]] = []
        self.active_context_name = "test-context"

    def list_pods(self, namespace=None, label_selector=None):
        self.calls.append(("pods", namespace, label_selector))
        return list(self.pods)

    def list_stateful_sets(self, namespace=None, label_selector=None):
        self.calls.append(("statefulsets", namespace, label_selector))
        return list(self.ssets)


@pytest.fixture
def pod():
    return build_pod


@pytest.fixture
def stateful_set():
    return build_stateful_set


@pytest.fixture
def fake_k8s():
    return FakeK8sClient
