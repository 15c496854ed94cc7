"""Tree-to-timeline projection."""

from .enrichers import add_container_statuses, add_pod_events
from .lanes import LaneAllocator
from .timebase import padding_for, to_trace_time
from .walker import PodTelemetry, StatusWalker, build_trace

__all__ = [
    "LaneAllocator",
    "PodTelemetry",
    "StatusWalker",
    "add_container_statuses",
    "add_pod_events",
    "build_trace",
    "padding_for",
    "to_trace_time",
]
