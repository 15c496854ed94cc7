"""Tests for timestamp conversion, padding and lanes."""

from datetime import datetime, timedelta, timezone

from pipetrace.timeline import LaneAllocator, padding_for, to_trace_time

from builders import T0


class TestToTraceTime:
    """Tests for to_trace_time()."""

    def test_absolute_mode_uses_epoch(self):
        """Absolute mode returns epoch milliseconds scaled to microseconds."""
        point = datetime(1970, 1, 1, 0, 0, 2, tzinfo=timezone.utc)
        assert to_trace_time(T0, point) == 2_000_000

    def test_absolute_mode_ignores_reference(self):
        """Reference does not affect absolute timestamps."""
        point = T0 + timedelta(seconds=3)
        assert to_trace_time(T0, point) == to_trace_time(point, point)

    def test_relative_mode(self):
        """Relative mode measures from the reference."""
        point = T0 + timedelta(milliseconds=5000)
        assert to_trace_time(T0, point, offset_start_time=True) == 5000 * 1000
        assert to_trace_time(T0, T0, offset_start_time=True) == 0

    def test_truncates_to_milliseconds(self):
        """Sub-millisecond precision is dropped."""
        point = T0 + timedelta(microseconds=1999)
        assert to_trace_time(T0, point, offset_start_time=True) == 1000

    def test_naive_timestamps_are_utc(self):
        """Naive datetimes are interpreted as UTC."""
        naive = datetime(2023, 5, 1, 12, 0, 0)
        assert to_trace_time(T0, naive) == to_trace_time(T0, T0)


class TestPaddingFor:
    """Tests for padding_for()."""

    def test_equal_times_are_padded(self):
        assert padding_for(T0, T0, 1_000_000) == 1_000_000

    def test_custom_padding(self):
        assert padding_for(T0, T0, 42) == 42

    def test_different_times_not_padded(self):
        """Even a one millisecond difference disables padding."""
        assert padding_for(T0, T0 + timedelta(milliseconds=1), 1_000_000) == 0


class TestLaneAllocator:
    """Tests for LaneAllocator."""

    def test_root_lane_is_one(self):
        lanes = LaneAllocator()
        assert lanes.root_lane == 1
        assert lanes.last_lane == 1

    def test_lanes_strictly_increase(self):
        lanes = LaneAllocator()
        assert [lanes.next_lane() for _ in range(3)] == [2, 3, 4]
        assert lanes.last_lane == 4

    def test_allocators_are_independent(self):
        first = LaneAllocator()
        first.next_lane()
        assert LaneAllocator().next_lane() == 2
