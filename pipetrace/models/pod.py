"""Pod telemetry models used for enrichment."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PodEvent:
    """A Kubernetes event involving a pod."""

    message: str | None = None
    first_timestamp: datetime | None = None
    last_timestamp: datetime | None = None
    reason: str | None = None


@dataclass
class ContainerStatus:
    """Terminated-state timing of one container."""

    name: str
    started_at: datetime | None = None
    finished_at: datetime | None = None


@dataclass
class PodStatus:
    """Container and init-container statuses of a pod."""

    pod_name: str
    container_statuses: list[ContainerStatus] = field(default_factory=list)
    init_container_statuses: list[ContainerStatus] = field(default_factory=list)
