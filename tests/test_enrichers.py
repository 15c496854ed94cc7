"""Tests for pod-event and container-status enrichment."""

from datetime import timedelta

from builders import T0
from pipetrace.config import TraceConfig
from pipetrace.models import Category, ContainerStatus, PodEvent
from pipetrace.timeline import add_container_statuses, add_pod_events

CONFIG = TraceConfig(offset_start_time=True, padding=500)


class TestAddPodEvents:
    """Tests for add_pod_events()."""

    def test_adds_pair_on_lane(self):
        events = []
        pod_events = [
            PodEvent(
                message="Started container",
                first_timestamp=T0 + timedelta(seconds=1),
                last_timestamp=T0 + timedelta(seconds=3),
            )
        ]

        added = add_pod_events(events, pod_events, 5, T0, CONFIG)

        assert added == 1
        assert [(e.name, e.cat, e.ph, e.tid, e.ts) for e in events] == [
            ("Started container", "TaskRun,PodEvent", "B", 5, 1_000_000),
            ("Started container", "TaskRun,PodEvent", "E", 5, 3_000_000),
        ]

    def test_fallback_name(self):
        events = []
        add_pod_events(events, [PodEvent(first_timestamp=T0, last_timestamp=T0)], 2, T0, CONFIG)
        assert [e.name for e in events] == ["event", "event"]

    def test_same_timestamps_padded(self):
        events = []
        add_pod_events(events, [PodEvent(first_timestamp=T0, last_timestamp=T0)], 2, T0, CONFIG)
        assert events[1].ts - events[0].ts == 500

    def test_skips_events_missing_a_timestamp(self):
        """Events without first- or last-seen time contribute nothing."""
        events = []
        pod_events = [
            PodEvent(message="no last", first_timestamp=T0),
            PodEvent(message="no first", last_timestamp=T0),
            PodEvent(message="neither"),
        ]
        assert add_pod_events(events, pod_events, 2, T0, CONFIG) == 0
        assert events == []

    def test_none_is_empty(self):
        events = []
        assert add_pod_events(events, None, 2, T0, CONFIG) == 0


class TestAddContainerStatuses:
    """Tests for add_container_statuses()."""

    def test_uses_supplied_category(self):
        events = []
        statuses = [ContainerStatus("prepare", T0, T0 + timedelta(milliseconds=250))]

        add_container_statuses(events, statuses, Category.INIT_CONTAINER, 3, T0, CONFIG)

        assert [(e.name, e.cat, e.ph, e.tid, e.ts) for e in events] == [
            ("prepare", "InitContainer", "B", 3, 0),
            ("prepare", "InitContainer", "E", 3, 250_000),
        ]

    def test_string_category(self):
        events = []
        add_container_statuses(events, [ContainerStatus("c", T0, T0)], "Container", 3, T0, CONFIG)
        assert {e.cat for e in events} == {"Container"}
        assert events[1].ts - events[0].ts == 500

    def test_skips_unterminated(self):
        events = []
        statuses = [
            ContainerStatus("running"),
            ContainerStatus("half", started_at=T0),
            ContainerStatus("done", T0, T0 + timedelta(seconds=1)),
        ]
        assert add_container_statuses(events, statuses, Category.CONTAINER, 3, T0, CONFIG) == 1
        assert [e.name for e in events] == ["done", "done"]
