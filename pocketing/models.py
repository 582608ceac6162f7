"""Shared dataclasses for pocket scanning and motion planning."""
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .errors import CapacityExceededError

DEFAULT_CAPACITY = 64


class BoundaryPrimitive(Protocol):
    """A boundary curve segment that can report scanline crossings."""

    def crossings_at(self, y: float) -> Sequence[float]:
        """Return the x coordinates where this primitive crosses the line at y."""
        ...


@dataclass(frozen=True)
class Tool:
    """A resolved cutting tool."""
    diameter: float
    description: str = ''


@dataclass(frozen=True)
class MaterialExtent:
    """Vertical extent of the stock.

    Scanlines run from y = -origin up to y = height - origin.
    """
    height: float
    origin: float = 0.0

    @property
    def y_min(self) -> float:
        return -self.origin

    @property
    def y_max(self) -> float:
        return self.height - self.origin


@dataclass
class Interval:
    """A span of material to remove on one scanline."""
    start: float
    end: float

    @property
    def width(self) -> float:
        return abs(self.end - self.start)

    def as_tuple(self):
        return (self.start, self.end)


@dataclass
class IntervalRow:
    """One scanline: its y coordinate and left-to-right cut intervals."""
    y: float
    intervals: List[Interval] = field(default_factory=list)
    max_intervals: int = DEFAULT_CAPACITY

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self):
        return iter(self.intervals)

    def _check_room(self, extra: int = 1) -> None:
        if len(self.intervals) + extra > self.max_intervals:
            raise CapacityExceededError('intervals', self.max_intervals, self.y)

    def append(self, interval: Interval) -> None:
        self._check_room()
        self.intervals.append(interval)

    def insert(self, index: int, interval: Interval) -> None:
        self._check_room()
        self.intervals.insert(index, interval)

    def replace_intervals(self, intervals: List[Interval]) -> None:
        """Swap in a new interval list, enforcing the row capacity."""
        if len(intervals) > self.max_intervals:
            raise CapacityExceededError('intervals', self.max_intervals, self.y)
        self.intervals = intervals
