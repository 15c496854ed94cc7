"""Tekton PipelineRun status models.

Parsed from the camelCase JSON the Tekton API serves. Unknown fields are
ignored; timestamps may be absent while a phase has not been reached.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TektonModel(BaseModel):
    """Base for camelCase Tekton documents."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Condition(TektonModel):
    """Knative-style status condition."""

    type: str | None = None
    status: str | None = None
    reason: str | None = None
    message: str | None = None
    last_transition_time: datetime | None = None


class TerminatedState(TektonModel):
    """Terminated container state reported for a step."""

    container_id: str | None = Field(default=None, alias="containerID")
    exit_code: int | None = None
    reason: str | None = None
    message: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None


class TaskRunStep(TektonModel):
    """One step of a TaskRun."""

    name: str
    container: str | None = None
    image_id: str | None = Field(default=None, alias="imageID")
    terminated: TerminatedState | None = None


class RunStatus(TektonModel):
    """Status of a custom-task Run."""

    start_time: datetime | None = None
    completion_time: datetime | None = None
    conditions: list[Condition] = Field(default_factory=list)


class RunObject(TektonModel):
    """Entry of PipelineRunStatus.runs."""

    pipeline_task_name: str
    status: RunStatus = Field(default_factory=RunStatus)


class TaskRunStatus(TektonModel):
    """Status of a TaskRun."""

    start_time: datetime | None = None
    completion_time: datetime | None = None
    conditions: list[Condition] = Field(default_factory=list)
    pod_name: str | None = None
    steps: list[TaskRunStep] = Field(default_factory=list)


class TaskRunObject(TektonModel):
    """Entry of PipelineRunStatus.taskRuns."""

    pipeline_task_name: str
    status: TaskRunStatus = Field(default_factory=TaskRunStatus)


class PipelineRunStatus(TektonModel):
    """Root of the status tree.

    ``runs`` and ``task_runs`` keep the key order of the source document;
    lanes are assigned in that order.
    """

    start_time: datetime | None = None
    completion_time: datetime | None = None
    conditions: list[Condition] = Field(default_factory=list)
    runs: dict[str, RunObject] = Field(default_factory=dict)
    task_runs: dict[str, TaskRunObject] = Field(default_factory=dict)


class ObjectMeta(TektonModel):
    """Subset of Kubernetes object metadata."""

    name: str | None = None
    namespace: str | None = None
    uid: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)


class PipelineRun(TektonModel):
    """A Tekton PipelineRun resource."""

    api_version: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: dict[str, Any] = Field(default_factory=dict)
    status: PipelineRunStatus | None = None
