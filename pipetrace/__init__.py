"""pipetrace: Tekton PipelineRun status to trace-viewer timelines."""

from .app import ITraceApplication, TraceApplication, serialize_events
from .config import ClusterSettings, TraceConfig
from .errors import (
    ClusterError,
    InvalidStatusError,
    NotFoundError,
    ParseError,
    PipetraceError,
)
from .models import PipelineRun, PipelineRunStatus, TraceEvent
from .timeline import StatusWalker, build_trace

__all__ = [
    # Application
    "ITraceApplication",
    "TraceApplication",
    "serialize_events",
    # Config
    "TraceConfig",
    "ClusterSettings",
    # Models
    "PipelineRun",
    "PipelineRunStatus",
    "TraceEvent",
    # Projection
    "StatusWalker",
    "build_trace",
    # Errors
    "PipetraceError",
    "InvalidStatusError",
    "NotFoundError",
    "ParseError",
    "ClusterError",
]
