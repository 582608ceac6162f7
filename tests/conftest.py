"""Test configuration and fixtures."""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import matplotlib
matplotlib.use('Agg')

import pytest

from pocketing import (
    CutParams,
    Interval,
    IntervalRow,
    MaterialExtent,
    PocketGrid,
    PocketSettings,
    Tool
)


@dataclass
class LineSegment:
    """Straight boundary edge reporting crossings with closed end points.

    Horizontal edges report nothing; the vertical edges meeting them supply
    the crossings.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    def crossings_at(self, y: float) -> List[float]:
        if self.y1 == self.y2:
            return []
        low, high = sorted((self.y1, self.y2))
        if y < low or y > high:
            return []
        t = (y - self.y1) / (self.y2 - self.y1)
        return [self.x1 + t * (self.x2 - self.x1)]


@dataclass
class FixedCrossings:
    """Primitive returning preset crossings per scanline (default for any y)."""
    default: Sequence[float] = ()
    by_y: Dict[float, Sequence[float]] = field(default_factory=dict)

    def crossings_at(self, y: float) -> List[float]:
        return list(self.by_y.get(y, self.default))


def polygon(points: Sequence[Tuple[float, float]]) -> List[LineSegment]:
    """Closed chain of line segments through points."""
    return [
        LineSegment(*points[i], *points[(i + 1) % len(points)])
        for i in range(len(points))
    ]


def rectangle(x0: float, y0: float, x1: float, y1: float) -> List[LineSegment]:
    return polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])


def make_grid(rows: Sequence[Sequence[Tuple[float, float]]], resolution: float = 1.0,
              y0: float = 0.0, max_intervals: int = 64) -> PocketGrid:
    """Build a grid directly from per-row (start, end) tuples."""
    grid = PocketGrid(resolution, max_intervals=max_intervals)
    for index, intervals in enumerate(rows):
        grid.rows.append(IntervalRow(
            y=y0 + index * resolution,
            intervals=[Interval(start, end) for start, end in intervals],
            max_intervals=max_intervals
        ))
        grid.segment_count += len(intervals)
    return grid


@pytest.fixture
def tool():
    """A 1-unit end mill."""
    return Tool(diameter=1.0, description='1.0 flat end mill')


@pytest.fixture
def square():
    """Boundary of the square [0, 10] x [0, 10]."""
    return rectangle(0, 0, 10, 10)


@pytest.fixture
def island():
    """Boundary of the square island [3, 7] x [3, 7]."""
    return rectangle(3, 3, 7, 7)


@pytest.fixture
def material():
    """Stock spanning y = 0 to 10."""
    return MaterialExtent(height=10.0)


@pytest.fixture
def settings():
    """Pocket settings with a 1-unit scanline spacing."""
    return PocketSettings(
        resolution=1.0,
        traverse_height=0.25,
        safety_height=0.5
    )


@pytest.fixture
def cut_params():
    """End mill cutting parameters."""
    return CutParams(
        spindle_speed=12000,
        feed_rate=12.0,
        plunge_rate=2.0,
        pass_depth=0.25
    )
