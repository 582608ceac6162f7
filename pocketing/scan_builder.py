"""Scanline construction of pocket grids.

For each horizontal scanline across the material the boundary chain is asked
for its crossings. The pooled crossings are sorted, near-duplicates (shared
vertices, horizontal edges) are collapsed, and consecutive pairs are turned
into cut intervals with the even-odd rule. Pairs no wider than the tool are
left for the perimeter pass; the rest are pulled in from the wall by the
stock allowance.
"""
import math
from typing import TYPE_CHECKING, Iterable, List

from .errors import DegenerateGeometryError
from .models import DEFAULT_CAPACITY, BoundaryPrimitive, Interval, IntervalRow, MaterialExtent
from .utils.crossings import collect_crossings, sort_crossings, pair_crossings
from .utils.tool_compensation import get_interval_offset, offset_interval, is_cuttable
from .utils.validators import validate_tool, validate_material

if TYPE_CHECKING:
    from .pocket import PocketGrid


def calculate_scanlines(
    material: MaterialExtent,
    resolution: float,
    precision: float = 1e-5
) -> List[float]:
    """
    Calculate scanline Y values covering the material extent.

    Each Y is computed from its index rather than by accumulation so that
    grids built over the same extent line up exactly.

    Args:
        material: Vertical extent and origin of the stock
        resolution: Scanline spacing
        precision: Tolerance for the last scanline landing on y_max

    Returns:
        Ascending list of scanline Y values (at least one)
    """
    row_count = int(math.floor(material.height / resolution + precision)) + 1
    return [material.y_min + i * resolution for i in range(row_count)]


class ScanBuilder:
    """Populates a PocketGrid from a boundary chain."""

    def __init__(
        self,
        max_crossings: int = DEFAULT_CAPACITY,
        precision: float = 1e-5,
        stock_factor: float = 0.1,
        strict_crossings: bool = False
    ):
        """
        Initialize the builder.

        Args:
            max_crossings: Upper bound on crossings pooled for one scanline
            precision: Tolerance for collapsing duplicate crossings
            stock_factor: Fraction of tool diameter left as stock per side
            strict_crossings: Raise on an odd crossing count instead of warning
        """
        self.max_crossings = max_crossings
        self.precision = precision
        self.stock_factor = stock_factor
        self.strict_crossings = strict_crossings

    @classmethod
    def from_settings(cls, settings) -> 'ScanBuilder':
        """Create a builder from PocketSettings."""
        return cls(
            max_crossings=settings.max_crossings,
            precision=settings.precision,
            stock_factor=settings.stock_factor,
            strict_crossings=settings.strict_crossings
        )

    def build(
        self,
        grid: 'PocketGrid',
        boundary: Iterable[BoundaryPrimitive],
        tool,
        material: MaterialExtent,
        island: bool = False
    ) -> int:
        """
        Fill a grid with one row per scanline.

        Args:
            grid: Grid to populate; any previous rows are discarded and the
                grid is left empty if any scanline fails
            boundary: Boundary primitives exposing crossings_at(y)
            tool: Resolved tool
            material: Vertical extent and origin of the stock
            island: Build protected material to subtract from a pocket
                (keep every pair and grow it) instead of a pocket

        Returns:
            Number of intervals kept (the grid's segment_count)

        Raises:
            InvalidToolError: If the tool diameter is not positive
            CapacityExceededError: If a scanline exceeds the crossing or
                interval bound
            DegenerateGeometryError: On an odd crossing count in strict mode
        """
        validate_tool(tool)
        validate_material(material)

        primitives = list(boundary)
        compensation = 'exterior' if island else 'interior'
        offset = get_interval_offset(tool.diameter, compensation, self.stock_factor)

        grid.dispose()

        # Rows are committed only once every scanline has been built
        rows: List[IntervalRow] = []
        warnings: List[str] = []
        for y in calculate_scanlines(material, grid.resolution, self.precision):
            rows.append(self._build_row(
                primitives, tool, y, offset, island, grid.max_intervals, warnings
            ))

        grid.rows = rows
        grid.segment_count = sum(len(row) for row in rows)
        grid.warnings = warnings
        return grid.segment_count

    def _build_row(
        self,
        primitives: List[BoundaryPrimitive],
        tool,
        y: float,
        offset: float,
        island: bool,
        max_intervals: int,
        warnings: List[str]
    ) -> IntervalRow:
        """Build the interval row for one scanline."""
        crossings = collect_crossings(primitives, y, self.max_crossings)
        crossings = sort_crossings(crossings, self.precision)
        pairs, leftover = pair_crossings(crossings)

        if leftover is not None:
            message = (
                f"Scanline y={y:.4f} has an odd number of crossings ({len(crossings)}); "
                f"dropped trailing crossing at x={leftover:.4f}"
            )
            if self.strict_crossings:
                raise DegenerateGeometryError(message)
            warnings.append(message)

        row = IntervalRow(y=y, max_intervals=max_intervals)
        for start, end in pairs:
            if not island and not is_cuttable(start, end, tool.diameter):
                continue
            row.append(Interval(*offset_interval(start, end, offset)))
        return row
