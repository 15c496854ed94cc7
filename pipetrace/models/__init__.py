"""Data models for pipetrace."""

from .pod import ContainerStatus, PodEvent, PodStatus
from .status import (
    Condition,
    PipelineRun,
    PipelineRunStatus,
    RunObject,
    RunStatus,
    TaskRunObject,
    TaskRunStatus,
    TaskRunStep,
    TerminatedState,
)
from .tracing import ROOT_LANE, TRACE_PID, Category, Phase, TraceEvent, join_categories

__all__ = [
    # Status tree
    "Condition",
    "PipelineRun",
    "PipelineRunStatus",
    "RunObject",
    "RunStatus",
    "TaskRunObject",
    "TaskRunStatus",
    "TaskRunStep",
    "TerminatedState",
    # Pod telemetry
    "PodEvent",
    "ContainerStatus",
    "PodStatus",
    # Tracing
    "TraceEvent",
    "Phase",
    "Category",
    "join_categories",
    "TRACE_PID",
    "ROOT_LANE",
]
