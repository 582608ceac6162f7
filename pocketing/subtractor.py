"""Row-by-row subtraction of island grids from a pocket grid.

Overlap cases, where '*' marks the pocket interval and '+' the island:

    CASE 1: *---+---+---*   island inside pocket: split into two
    CASE 2: *---+---*---+   island overlaps right end: trim end
    CASE 3: +---*---+---*   island overlaps left end: trim start
    CASE 4: +---*---*---+   island covers pocket interval: drop it

CASE 4 is tested first, with the same tolerance as CASE 1, so an island
that just overshoots both ends removes the interval instead of splitting it.
"""
from typing import TYPE_CHECKING, List, Tuple

from .models import Interval, IntervalRow
from .utils.validators import validate_grid_alignment, validate_row_order

if TYPE_CHECKING:
    from .pocket import PocketGrid


def _contains(outer: Interval, inner: Interval, precision: float) -> bool:
    """True if both ends of inner lie within outer, allowing precision slack."""
    return (
        inner.start + precision >= outer.start and
        inner.start - precision <= outer.end and
        inner.end + precision >= outer.start and
        inner.end - precision <= outer.end
    )


def _covers(island: Interval, interval: Interval, precision: float) -> bool:
    """True if island reaches both ends of interval, allowing precision slack."""
    return (
        island.start - precision <= interval.start and
        island.end + precision >= interval.end
    )


def subtract_row(
    row_a: IntervalRow,
    row_b: IntervalRow,
    precision: float = 1e-5
) -> Tuple[List[Interval], int]:
    """
    Subtract one row's island intervals from a pocket row.

    Island intervals are applied in their stored order; once a pocket
    interval has been split, later islands are compared against the
    right-hand piece. Neither input row is modified.

    Args:
        row_a: Pocket row
        row_b: Island row on the same scanline
        precision: Tolerance for the containment test

    Returns:
        Tuple of (new interval list, net change in interval count)

    Raises:
        CapacityExceededError: If splitting pushes the row past its bound
        RowOrderError: If a split leaves the row out of order
    """
    working = IntervalRow(
        y=row_a.y,
        intervals=[Interval(i.start, i.end) for i in row_a.intervals],
        max_intervals=row_a.max_intervals
    )
    if not row_b.intervals:
        return working.intervals, 0

    change = 0
    j = 0
    while j < len(working.intervals):
        dropped = False
        for island in row_b.intervals:
            current = working.intervals[j]
            if _covers(island, current, precision):
                del working.intervals[j]
                change -= 1
                dropped = True
                break
            elif _contains(current, island, precision):
                right = Interval(island.end, current.end)
                current.end = island.start
                working.insert(j + 1, right)
                validate_row_order(working, precision)
                change += 1
                j += 1
            elif current.start < island.start < current.end:
                current.end = island.start
            elif current.start < island.end < current.end:
                current.start = island.end
        if not dropped:
            j += 1

    return working.intervals, change


def subtract_grids(
    grid_a: 'PocketGrid',
    grid_b: 'PocketGrid',
    precision: float = 1e-5
) -> int:
    """
    Carve grid_b's intervals out of grid_a in place.

    The grids must sample the same scanlines. Every row is computed before
    any is written back, so a failure leaves grid_a unchanged. grid_b is
    only read.

    Args:
        grid_a: Pocket grid, modified in place
        grid_b: Island grid
        precision: Tolerance for alignment and containment tests

    Returns:
        Net change in grid_a's interval count

    Raises:
        MismatchedGridsError: If the grids are not row-aligned
    """
    validate_grid_alignment(grid_a, grid_b, precision)

    results = [
        subtract_row(row_a, row_b, precision)
        for row_a, row_b in zip(grid_a.rows, grid_b.rows)
    ]

    total_change = 0
    for row, (intervals, change) in zip(grid_a.rows, results):
        row.replace_intervals(intervals)
        total_change += change

    grid_a.segment_count += total_change
    return total_change
