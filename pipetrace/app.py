"""Application wiring: configuration, sources and the walker."""

import json
from typing import Protocol

from .config import ClusterSettings, PathLike, TraceConfig
from .errors import ClusterError
from .logging_config import get_logger
from .models import PipelineRun, TraceEvent
from .sources import ClusterClient, FileStatusSource
from .timeline import build_trace

logger = get_logger(__name__)


def serialize_events(events: list[TraceEvent]) -> str:
    """Render events as the indented JSON array the viewer loads."""
    return json.dumps([e.to_dict() for e in events], indent=2)


class ITraceApplication(Protocol):
    """Entry points shared by the CLI and the HTTP API."""

    @property
    def config(self) -> TraceConfig:
        """Default trace configuration."""
        ...

    async def trace_pipelinerun(
        self, pipelinerun: PipelineRun, config: TraceConfig | None = None, enrich: bool = True
    ) -> list[TraceEvent]:
        """Trace an already loaded PipelineRun."""
        ...

    async def trace_file(self, path: PathLike, config: TraceConfig | None = None) -> list[TraceEvent]:
        """Trace a PipelineRun JSON file."""
        ...

    async def trace_named(self, name: str, config: TraceConfig | None = None) -> list[TraceEvent]:
        """Fetch a PipelineRun from the cluster and trace it."""
        ...

    async def list_pipelineruns(self) -> list[str]:
        """Names of PipelineRuns in the configured namespace."""
        ...


class TraceApplication:
    """Builds traces from files or from the cluster.

    With ``offline`` set no cluster client is ever created: file input is
    traced without pod enrichment and named lookups are unavailable.
    """

    def __init__(
        self,
        config: TraceConfig | None = None,
        cluster_settings: ClusterSettings | None = None,
        cluster: ClusterClient | None = None,
        offline: bool = False,
    ):
        self._config = config or TraceConfig()
        self._cluster_settings = cluster_settings or ClusterSettings()
        self._cluster = cluster
        self._offline = offline

    @property
    def config(self) -> TraceConfig:
        return self._config

    @property
    def cluster(self) -> ClusterClient:
        """Cluster client, created on first use."""
        if self._offline:
            raise ClusterError("Cluster access disabled (offline mode)")
        if self._cluster is None:
            self._cluster = ClusterClient(self._cluster_settings)
        return self._cluster

    async def trace_pipelinerun(
        self,
        pipelinerun: PipelineRun,
        config: TraceConfig | None = None,
        enrich: bool = True,
    ) -> list[TraceEvent]:
        """Trace an already loaded PipelineRun."""
        cfg = config or self._config
        cluster = self.cluster if enrich and not self._offline else None
        namespace = pipelinerun.metadata.namespace or self._cluster_settings.namespace

        logger.info("Tracing PipelineRun %s", pipelinerun.metadata.name or "<unnamed>")
        return await build_trace(
            pipelinerun.status,
            cfg,
            pod_events=cluster,
            pod_status=cluster,
            namespace=namespace,
        )

    async def trace_file(self, path: PathLike, config: TraceConfig | None = None) -> list[TraceEvent]:
        """Trace a PipelineRun JSON file."""
        pipelinerun = await FileStatusSource(path).get_pipelinerun()
        return await self.trace_pipelinerun(pipelinerun, config)

    async def trace_named(self, name: str, config: TraceConfig | None = None) -> list[TraceEvent]:
        """Fetch a PipelineRun from the cluster and trace it."""
        pipelinerun = await self.cluster.get_pipelinerun(name)
        return await self.trace_pipelinerun(pipelinerun, config)

    async def list_pipelineruns(self) -> list[str]:
        """Names of PipelineRuns in the configured namespace."""
        return await self.cluster.list_pipelineruns()
