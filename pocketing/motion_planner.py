"""Zig-zag motion planning for one depth pass over a pocket grid."""
from typing import TYPE_CHECKING

from .motions import (
    Comment,
    FeedDescend,
    FeedLine,
    MotionSink,
    RapidMove,
    RapidPlunge,
    Retract
)
from .utils.gcode_format import format_coordinate
from .utils.validators import validate_tool

if TYPE_CHECKING:
    from .pocket import PocketGrid


class MotionPlanner:
    """Turns a populated pocket grid into retract/traverse/plunge/cut motions."""

    def __init__(self, traverse_height: float, precision: float = 1e-5, decimals: int = 4):
        """
        Initialize the planner.

        Args:
            traverse_height: Z the tool retracts to before every traverse
            precision: Tolerance for comparing the rapid and cut depths
            decimals: Decimal places for the depth in pass comments
        """
        self.traverse_height = traverse_height
        self.precision = precision
        self.decimals = decimals

    @classmethod
    def from_settings(cls, settings) -> 'MotionPlanner':
        """Create a planner from PocketSettings."""
        return cls(
            traverse_height=settings.traverse_height,
            precision=settings.precision,
            decimals=settings.decimals
        )

    def make(
        self,
        grid: 'PocketGrid',
        sink: MotionSink,
        depth: float,
        rapid_depth: float,
        tool
    ) -> int:
        """
        Emit the motions for one pass at a fixed depth.

        Even rows are cut left to right and odd rows right to left. Every
        interval gets its own retract, traverse and descent: on concave
        pockets the next row of the zig-zag can pass over material that has
        to stay, e.g.

            +---------------+
            +---*********---+
            +------***------+
            +-*************-+
            +---------------+

        so the tool never links two cuts at depth.

        Args:
            grid: Populated pocket grid (read only)
            sink: Receiver for the motion events
            depth: Z of the pass floor
            rapid_depth: Lowest Z known to be clear; the tool rapids down to
                it before feeding to depth when it is at or above depth
            tool: Resolved tool

        Returns:
            Number of cuts emitted
        """
        validate_tool(tool)

        if grid.segment_count == 0:
            return 0

        sink.emit(Comment(f"Pass depth: {format_coordinate(depth, self.decimals)}"))

        cuts = 0
        for index, row in enumerate(grid.rows):
            forward = index % 2 == 0
            intervals = row.intervals if forward else reversed(row.intervals)

            for interval in intervals:
                if interval.width < tool.diameter:
                    continue

                if forward:
                    near, far = interval.start, interval.end
                else:
                    near, far = interval.end, interval.start

                sink.emit(Retract(self.traverse_height))
                sink.emit(RapidMove(near, row.y))
                if rapid_depth >= depth - self.precision:
                    sink.emit(RapidPlunge(rapid_depth))
                sink.emit(FeedDescend(depth))
                sink.emit(FeedLine(far, row.y))
                cuts += 1

        sink.emit(Retract(self.traverse_height))
        return cuts
