"""Status and pod telemetry sources."""

from .base import IPodEventSource, IPodStatusSource, IStatusSource
from .cluster import ClusterClient
from .file_source import FileStatusSource, parse_pipelinerun

__all__ = [
    "IStatusSource",
    "IPodEventSource",
    "IPodStatusSource",
    "ClusterClient",
    "FileStatusSource",
    "parse_pipelinerun",
]
