"""Kubernetes API wrapper."""

from __future__ import annotations

import logging
from typing import Any

from kubernetes import client, config

from stack_guard.config.settings import settings

logger = logging.getLogger(__name__)


class K8sClient:
    """Thin wrapper around the Kubernetes Python client."""

    def __init__(self, context: str | None = None):
        self.context = context
        self._core_v1: client.CoreV1Api | None = None
        self._apps_v1: client.AppsV1Api | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            config.load_incluster_config()
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    @property
    def apps_v1(self) -> client.AppsV1Api:
        if self._apps_v1 is None:
            self._apps_v1 = client.AppsV1Api(api_client=self._load_config())
        return self._apps_v1

    @property
    def active_context_name(self) -> str:
        if self.context:
            return self.context
        try:
            _, ctx = config.list_kube_config_contexts()
            return ctx.get("name", "unknown") if ctx else "unknown"
        except config.ConfigException:
            return "in-cluster"

    def list_pods(
        self, namespace: str | None = None, label_selector: str | None = None,
    ) -> list[Any]:
        """List Pods, optionally restricted to a namespace and label selector."""
        logger.debug("Listing pods namespace=%s selector=%s", namespace, label_selector)
        kwargs: dict[str, Any] = {"_request_timeout": settings.request_timeout}
        if label_selector:
            kwargs["label_selector"] = label_selector
        if namespace:
            result = self.core_v1.list_namespaced_pod(namespace=namespace, **kwargs)
        else:
            result = self.core_v1.list_pod_for_all_namespaces(**kwargs)
        return result.items

    def list_stateful_sets(
        self, namespace: str | None = None, label_selector: str | None = None,
    ) -> list[Any]:
        """List StatefulSets, optionally restricted to a namespace and label selector."""
        logger.debug("Listing statefulsets namespace=%s selector=%s", namespace, label_selector)
        kwargs: dict[str, Any] = {"_request_timeout": settings.request_timeout}
        if label_selector:
            kwargs["label_selector"] = label_selector
        if namespace:
            result = self.apps_v1.list_namespaced_stateful_set(namespace=namespace, **kwargs)
        else:
            result = self.apps_v1.list_stateful_set_for_all_namespaces(**kwargs)
        return result.items
