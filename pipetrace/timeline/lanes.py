"""Lane (trace thread id) allocation."""

from ..models import ROOT_LANE


class LaneAllocator:
    """Hands out fresh lane ids for one tree walk.

    Lane 1 belongs to the PipelineRun itself; every run and task-run gets
    the next id. Not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._last = ROOT_LANE

    @property
    def root_lane(self) -> int:
        return ROOT_LANE

    @property
    def last_lane(self) -> int:
        """Most recently allocated lane (the root lane before any call)."""
        return self._last

    def next_lane(self) -> int:
        self._last += 1
        return self._last
