"""Pocket grid: the per-scanline interval model shared by build, subtract and make."""
from typing import Iterable, List, Optional

from .config import Config
from .models import DEFAULT_CAPACITY, BoundaryPrimitive, IntervalRow, MaterialExtent
from .motion_planner import MotionPlanner
from .motions import MotionSink
from .scan_builder import ScanBuilder
from .subtractor import subtract_grids
from .utils.validators import validate_resolution


class PocketGrid:
    """Y-ordered rows of cut intervals spanning the material at a fixed resolution."""

    def __init__(self, resolution: float, max_intervals: int = DEFAULT_CAPACITY):
        """
        Create an empty grid.

        Args:
            resolution: Scanline spacing
            max_intervals: Upper bound on intervals held by one row

        Raises:
            ValueError: If resolution is not positive
        """
        validate_resolution(resolution)
        self.resolution = resolution
        self.max_intervals = max_intervals
        self.rows: List[IntervalRow] = []
        self.segment_count = 0
        self.warnings: List[str] = []

    def __repr__(self) -> str:
        return (
            f"PocketGrid(resolution={self.resolution}, rows={self.row_count}, "
            f"segments={self.segment_count})"
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def y_min(self) -> Optional[float]:
        return self.rows[0].y if self.rows else None

    @property
    def y_max(self) -> Optional[float]:
        return self.rows[-1].y if self.rows else None

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to pocket."""
        return self.segment_count == 0

    def prepare(
        self,
        boundary: Iterable[BoundaryPrimitive],
        tool,
        material: MaterialExtent,
        builder: Optional[ScanBuilder] = None,
        island: bool = False
    ) -> int:
        """
        Populate the grid from a boundary chain.

        Returns:
            Number of intervals kept
        """
        builder = builder or ScanBuilder()
        return builder.build(self, boundary, tool, material, island=island)

    def subtract(self, islands: 'PocketGrid', precision: float = Config.PRECISION) -> int:
        """
        Carve an island grid out of this grid in place.

        Returns:
            Net change in the number of intervals
        """
        return subtract_grids(self, islands, precision)

    def make(
        self,
        sink: MotionSink,
        depth: float,
        rapid_depth: float,
        tool,
        planner: Optional[MotionPlanner] = None,
        traverse_height: float = Config.TRAVERSE_HEIGHT
    ) -> int:
        """
        Emit one depth pass over this grid into sink.

        Returns:
            Number of cuts emitted
        """
        planner = planner or MotionPlanner(traverse_height, Config.PRECISION, Config.DECIMALS)
        return planner.make(self, sink, depth, rapid_depth, tool)

    def intervals_at(self, index: int):
        """Return the (start, end) tuples of one row."""
        return [interval.as_tuple() for interval in self.rows[index].intervals]

    def dispose(self) -> None:
        """Release all rows."""
        self.rows = []
        self.segment_count = 0
        self.warnings = []
