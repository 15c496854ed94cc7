"""Begin/End pair emission shared by the walker and enrichers."""

from datetime import datetime

from ..config import TraceConfig
from ..models import TRACE_PID, Phase, TraceEvent
from .timebase import padding_for, to_trace_time


def append_span(
    events: list[TraceEvent],
    name: str,
    cat: str,
    lane: int,
    start: datetime,
    end: datetime,
    reference: datetime,
    config: TraceConfig,
    pad: bool = True,
) -> None:
    """Append a Begin/End pair; End is padded when start equals end."""
    events.append(begin_event(name, cat, lane, start, reference, config))
    delta = padding_for(start, end, config.padding) if pad else 0
    events.append(end_event(name, cat, lane, end, reference, config, delta))


def begin_event(
    name: str,
    cat: str,
    lane: int,
    start: datetime,
    reference: datetime,
    config: TraceConfig,
) -> TraceEvent:
    return TraceEvent(
        name=name,
        cat=cat,
        ph=Phase.BEGIN.value,
        pid=TRACE_PID,
        tid=lane,
        ts=to_trace_time(reference, start, config.offset_start_time),
    )


def end_event(
    name: str,
    cat: str,
    lane: int,
    end: datetime,
    reference: datetime,
    config: TraceConfig,
    delta: int = 0,
) -> TraceEvent:
    return TraceEvent(
        name=name,
        cat=cat,
        ph=Phase.END.value,
        pid=TRACE_PID,
        tid=lane,
        ts=to_trace_time(reference, end, config.offset_start_time) + delta,
    )
