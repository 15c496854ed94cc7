"""Collaborator interfaces consumed by the walker and the application."""

from typing import Protocol

from ..models import PipelineRun, PodEvent, PodStatus


class IStatusSource(Protocol):
    """Supplies one PipelineRun."""

    async def get_pipelinerun(self, name: str) -> PipelineRun:
        """Return the PipelineRun. Raises NotFoundError or ParseError."""
        ...


class IPodEventSource(Protocol):
    """Kubernetes events involving a pod."""

    async def list_pod_events(self, pod_name: str, namespace: str | None = None) -> list[PodEvent]:
        """List events whose involved object is the pod."""
        ...


class IPodStatusSource(Protocol):
    """Container statuses of a pod."""

    async def read_pod_status(self, pod_name: str, namespace: str | None = None) -> PodStatus | None:
        """Read pod status; None when the pod no longer exists."""
        ...
