"""Kubernetes-backed status and pod telemetry sources."""

import asyncio
from typing import Any

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

from ..config import ClusterSettings
from ..errors import ClusterError, NotFoundError
from ..logging_config import get_logger
from ..models import ContainerStatus, PipelineRun, PodEvent, PodStatus
from .file_source import parse_pipelinerun

logger = get_logger(__name__)

PIPELINERUN_PLURAL = "pipelineruns"


def _container_status(status: Any) -> ContainerStatus:
    terminated = status.state.terminated if status.state else None
    return ContainerStatus(
        name=status.name,
        started_at=terminated.started_at if terminated else None,
        finished_at=terminated.finished_at if terminated else None,
    )


class ClusterClient:
    """Reads PipelineRuns, pod events and pod statuses from the cluster.

    The Kubernetes client is blocking, so every call runs in a worker
    thread. API objects are created on first use from kubeconfig, falling
    back to the in-cluster service account.
    """

    def __init__(
        self,
        settings: ClusterSettings | None = None,
        custom_api: Any = None,
        core_api: Any = None,
    ):
        self._settings = settings or ClusterSettings()
        self._custom_api = custom_api
        self._core_api = core_api

    @property
    def namespace(self) -> str:
        return self._settings.namespace

    def _ensure_clients(self) -> None:
        if self._custom_api is not None and self._core_api is not None:
            return

        try:
            config.load_kube_config(context=self._settings.context)
        except ConfigException:
            logger.info("No usable kubeconfig, using in-cluster configuration")
            try:
                config.load_incluster_config()
            except ConfigException as e:
                raise ClusterError(f"No Kubernetes configuration available: {e}") from e

        api_client = client.ApiClient()
        if self._custom_api is None:
            self._custom_api = client.CustomObjectsApi(api_client)
        if self._core_api is None:
            self._core_api = client.CoreV1Api(api_client)

    def _request_kwargs(self) -> dict:
        if self._settings.request_timeout is None:
            return {}
        return {"_request_timeout": self._settings.request_timeout}

    async def _call(self, func, *args, **kwargs):
        try:
            return await asyncio.to_thread(func, *args, **kwargs, **self._request_kwargs())
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError(e.reason or "Not Found") from e
            raise ClusterError(f"Kubernetes API error {e.status}: {e.reason}") from e

    async def get_pipelinerun(self, name: str) -> PipelineRun:
        """Fetch one PipelineRun by name."""
        self._ensure_clients()
        s = self._settings
        try:
            body = await self._call(
                self._custom_api.get_namespaced_custom_object,
                s.group,
                s.version,
                s.namespace,
                PIPELINERUN_PLURAL,
                name,
            )
        except NotFoundError as e:
            raise NotFoundError(f"PipelineRun {name} not found in namespace {s.namespace}") from e
        return parse_pipelinerun(body)

    async def list_pipelineruns(self) -> list[str]:
        """Names of the PipelineRuns in the namespace."""
        self._ensure_clients()
        s = self._settings
        body = await self._call(
            self._custom_api.list_namespaced_custom_object,
            s.group,
            s.version,
            s.namespace,
            PIPELINERUN_PLURAL,
        )
        items = body.get("items") or []
        return [(item.get("metadata") or {}).get("name") for item in items]

    async def list_pod_events(self, pod_name: str, namespace: str | None = None) -> list[PodEvent]:
        """List events whose involved object is ``pod_name``."""
        self._ensure_clients()
        result = await self._call(
            self._core_api.list_namespaced_event,
            namespace or self.namespace,
            field_selector=f"involvedObject.name={pod_name}",
        )
        return [
            PodEvent(
                message=event.message,
                first_timestamp=event.first_timestamp,
                last_timestamp=event.last_timestamp,
                reason=event.reason,
            )
            for event in result.items or []
        ]

    async def read_pod_status(self, pod_name: str, namespace: str | None = None) -> PodStatus | None:
        """Read container statuses of a pod; None if the pod is gone."""
        self._ensure_clients()
        try:
            pod = await self._call(
                self._core_api.read_namespaced_pod_status,
                pod_name,
                namespace or self.namespace,
            )
        except NotFoundError:
            logger.warning("Pod %s not found, skipping container statuses", pod_name)
            return None

        if pod is None or pod.status is None:
            return None
        return PodStatus(
            pod_name=pod_name,
            container_statuses=[_container_status(s) for s in pod.status.container_statuses or []],
            init_container_statuses=[
                _container_status(s) for s in pod.status.init_container_statuses or []
            ],
        )
