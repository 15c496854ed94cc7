"""Pod-event and container-status enrichment of task-run lanes."""

from datetime import datetime
from typing import Iterable

from ..config import TraceConfig
from ..logging_config import get_logger
from ..models import Category, ContainerStatus, PodEvent, TraceEvent, join_categories
from .spans import append_span

logger = get_logger(__name__)

POD_EVENT_FALLBACK_NAME = "event"
POD_EVENT_CATEGORY = join_categories(Category.TASK_RUN, Category.POD_EVENT)


def add_pod_events(
    events: list[TraceEvent],
    pod_events: Iterable[PodEvent] | None,
    lane: int,
    reference: datetime,
    config: TraceConfig,
) -> int:
    """Append a pair per pod event seen between first and last timestamp.

    Events missing either timestamp are skipped. Returns the number of
    pairs added.
    """
    added = 0
    for pod_event in pod_events or ():
        if pod_event.first_timestamp is None or pod_event.last_timestamp is None:
            logger.debug("Skipping pod event without timestamps: %s", pod_event.message)
            continue
        append_span(
            events,
            name=pod_event.message or POD_EVENT_FALLBACK_NAME,
            cat=POD_EVENT_CATEGORY,
            lane=lane,
            start=pod_event.first_timestamp,
            end=pod_event.last_timestamp,
            reference=reference,
            config=config,
        )
        added += 1
    return added


def add_container_statuses(
    events: list[TraceEvent],
    statuses: Iterable[ContainerStatus] | None,
    category: Category | str,
    lane: int,
    reference: datetime,
    config: TraceConfig,
) -> int:
    """Append a pair per terminated container. Returns the number added."""
    cat = category.value if isinstance(category, Category) else category
    added = 0
    for status in statuses or ():
        if status.started_at is None or status.finished_at is None:
            logger.debug("Skipping container %s without terminated times", status.name)
            continue
        append_span(
            events,
            name=status.name,
            cat=cat,
            lane=lane,
            start=status.started_at,
            end=status.finished_at,
            reference=reference,
            config=config,
        )
        added += 1
    return added
