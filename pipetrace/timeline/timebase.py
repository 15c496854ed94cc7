"""Timestamp conversion and zero-duration padding."""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)
MICROS_PER_MILLI = 1000


def as_utc(point: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if point.tzinfo is None:
        return point.replace(tzinfo=timezone.utc)
    return point


def to_trace_time(reference: datetime, point: datetime, offset_start_time: bool = False) -> int:
    """Convert ``point`` to an integer trace timestamp in microseconds.

    With ``offset_start_time`` the result is relative to ``reference``;
    otherwise it is the epoch time of ``point`` and ``reference`` is unused.
    Source timestamps are truncated to whole milliseconds first.
    """
    if offset_start_time:
        elapsed = as_utc(point) - as_utc(reference)
    else:
        elapsed = as_utc(point) - EPOCH
    return (elapsed // _MILLISECOND) * MICROS_PER_MILLI


def padding_for(start: datetime, end: datetime, padding: int) -> int:
    """Extra End duration for an interval whose start equals its end."""
    if as_utc(start) == as_utc(end):
        return padding
    return 0
