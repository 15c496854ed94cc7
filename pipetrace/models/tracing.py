"""Trace-viewer event models."""

from dataclasses import asdict, dataclass
from enum import Enum

TRACE_PID = 1
ROOT_LANE = 1


class Phase(str, Enum):
    """Trace event phases."""

    BEGIN = "B"
    END = "E"


class Category(str, Enum):
    """Source categories of trace events."""

    PIPELINE_RUN = "PipelineRun"
    RUN = "Run"
    TASK_RUN = "TaskRun"
    STEP = "Step"
    CONTAINER = "Container"
    INIT_CONTAINER = "InitContainer"
    POD_EVENT = "PodEvent"


def join_categories(*categories: Category) -> str:
    """Join categories into the comma-separated ``cat`` field."""
    return ",".join(c.value for c in categories)


@dataclass(frozen=True)
class TraceEvent:
    """A single Begin or End record in a trace-viewer timeline."""

    name: str
    cat: str  # comma-joined categories
    ph: str  # "B" or "E"
    pid: int
    tid: int  # lane
    ts: int  # microseconds

    def to_dict(self) -> dict:
        """Serialize with the field order the viewer expects."""
        return asdict(self)
