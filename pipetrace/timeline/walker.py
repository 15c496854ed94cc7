"""Status-tree walk producing trace-viewer events."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime

from ..config import TraceConfig
from ..errors import InvalidStatusError
from ..logging_config import get_logger
from ..models import (
    Category,
    PipelineRunStatus,
    PodEvent,
    PodStatus,
    TaskRunObject,
    TraceEvent,
    join_categories,
)
from ..sources.base import IPodEventSource, IPodStatusSource
from .enrichers import add_container_statuses, add_pod_events
from .lanes import LaneAllocator
from .spans import append_span, begin_event, end_event
from .timebase import padding_for

logger = get_logger(__name__)

PIPELINE_RUN_NAME = "PipelineRun"
STEP_CATEGORY = join_categories(Category.TASK_RUN, Category.STEP)


@dataclass
class PodTelemetry:
    """Enrichment data fetched for one task-run's pod."""

    pod_events: list[PodEvent] = field(default_factory=list)
    pod_status: PodStatus | None = None


def _required(start: datetime | None, end: datetime | None, what: str) -> tuple[datetime, datetime]:
    if start is None or end is None:
        raise InvalidStatusError(f"{what} is missing startTime or completionTime")
    return start, end


class StatusWalker:
    """Projects a PipelineRun status tree onto trace-viewer lanes.

    Lane 1 carries the PipelineRun. Each run and each task-run gets its own
    lane in document order; steps, pod events and container statuses share
    the lane of their task-run. Pod sources are optional: without them the
    walk emits only the status tree itself.
    """

    def __init__(
        self,
        config: TraceConfig | None = None,
        pod_events: IPodEventSource | None = None,
        pod_status: IPodStatusSource | None = None,
        namespace: str | None = None,
    ):
        self._config = config or TraceConfig()
        self._pod_events = pod_events
        self._pod_status = pod_status
        self._namespace = namespace

    async def walk(self, status: PipelineRunStatus | None) -> list[TraceEvent]:
        """Return the Begin/End events for the whole tree, in traversal order."""
        if status is None:
            raise InvalidStatusError("Incorrect PipelineRun status")

        start, completion = _required(status.start_time, status.completion_time, PIPELINE_RUN_NAME)
        reference = start
        lanes = LaneAllocator()
        events: list[TraceEvent] = []

        append_span(
            events,
            name=PIPELINE_RUN_NAME,
            cat=Category.PIPELINE_RUN.value,
            lane=lanes.root_lane,
            start=start,
            end=completion,
            reference=reference,
            config=self._config,
            pad=False,
        )

        for run_id, run in status.runs.items():
            run_start, run_end = _required(
                run.status.start_time, run.status.completion_time, f"Run {run_id}"
            )
            append_span(
                events,
                name=run.pipeline_task_name,
                cat=Category.RUN.value,
                lane=lanes.next_lane(),
                start=run_start,
                end=run_end,
                reference=reference,
                config=self._config,
            )

        prefetched: dict[str, PodTelemetry] | None = None
        if self._config.fetch_concurrency > 1:
            prefetched = await self._prefetch(status)

        for name, task_run in status.task_runs.items():
            if prefetched is not None:
                telemetry = prefetched.get(name, PodTelemetry())
            else:
                telemetry = None
            await self._walk_task_run(events, name, task_run, lanes.next_lane(), reference, telemetry)

        logger.info(
            "Projected PipelineRun onto %d lanes (%d events)",
            lanes.last_lane,
            len(events),
        )
        return events

    async def _walk_task_run(
        self,
        events: list[TraceEvent],
        name: str,
        task_run: TaskRunObject,
        lane: int,
        reference: datetime,
        telemetry: PodTelemetry | None,
    ) -> None:
        tr_status = task_run.status
        tr_start, tr_end = _required(tr_status.start_time, tr_status.completion_time, f"TaskRun {name}")
        label = task_run.pipeline_task_name

        events.append(
            begin_event(label, Category.TASK_RUN.value, lane, tr_start, reference, self._config)
        )

        if telemetry is None:
            telemetry = await self._fetch_telemetry(tr_status.pod_name)
        self._enrich(events, telemetry, lane, reference)

        for step in tr_status.steps:
            terminated = step.terminated
            if terminated is None or terminated.started_at is None or terminated.finished_at is None:
                logger.warning("Skipping step %s of %s: not terminated", step.name, name)
                continue
            append_span(
                events,
                name=f"{label}-{step.name}",
                cat=STEP_CATEGORY,
                lane=lane,
                start=terminated.started_at,
                end=terminated.finished_at,
                reference=reference,
                config=self._config,
            )

        events.append(
            end_event(
                label,
                Category.TASK_RUN.value,
                lane,
                tr_end,
                reference,
                self._config,
                padding_for(tr_start, tr_end, self._config.padding),
            )
        )

    def _enrich(
        self,
        events: list[TraceEvent],
        telemetry: PodTelemetry,
        lane: int,
        reference: datetime,
    ) -> None:
        add_pod_events(events, telemetry.pod_events, lane, reference, self._config)

        pod_status = telemetry.pod_status
        if pod_status is None:
            return
        add_container_statuses(
            events, pod_status.init_container_statuses, Category.INIT_CONTAINER, lane, reference, self._config
        )
        if self._config.include_containers:
            add_container_statuses(
                events, pod_status.container_statuses, Category.CONTAINER, lane, reference, self._config
            )

    async def _fetch_telemetry(self, pod_name: str | None) -> PodTelemetry:
        telemetry = PodTelemetry()
        if not pod_name:
            return telemetry

        if self._config.include_pod_events and self._pod_events is not None:
            telemetry.pod_events = await self._pod_events.list_pod_events(pod_name, self._namespace)

        if self._pod_status is not None:
            telemetry.pod_status = await self._pod_status.read_pod_status(pod_name, self._namespace)

        return telemetry

    async def _prefetch(self, status: PipelineRunStatus) -> dict[str, PodTelemetry]:
        """Fetch pod telemetry for all task-runs with bounded concurrency.

        The first failing fetch cancels the others and is re-raised as is.
        """
        semaphore = asyncio.Semaphore(self._config.fetch_concurrency)

        async def fetch(pod_name: str | None) -> PodTelemetry:
            async with semaphore:
                return await self._fetch_telemetry(pod_name)

        try:
            async with asyncio.TaskGroup() as group:
                tasks = {
                    name: group.create_task(fetch(task_run.status.pod_name))
                    for name, task_run in status.task_runs.items()
                }
        except ExceptionGroup as failed:
            raise failed.exceptions[0] from None
        return {name: task.result() for name, task in tasks.items()}


async def build_trace(
    status: PipelineRunStatus | None,
    config: TraceConfig | None = None,
    pod_events: IPodEventSource | None = None,
    pod_status: IPodStatusSource | None = None,
    namespace: str | None = None,
) -> list[TraceEvent]:
    """Walk ``status`` and return its trace events."""
    walker = StatusWalker(config, pod_events=pod_events, pod_status=pod_status, namespace=namespace)
    return await walker.walk(status)
