"""Input and invariant validation for pocket builds."""
from typing import TYPE_CHECKING, List, Tuple

from ..errors import InvalidToolError, MismatchedGridsError, RowOrderError
from ..models import IntervalRow, MaterialExtent

if TYPE_CHECKING:
    from ..pocket import PocketGrid


def validate_tool(tool) -> None:
    """
    Check a resolved tool before it is used.

    Args:
        tool: Any object exposing a diameter attribute

    Raises:
        InvalidToolError: If the tool is missing or its diameter is not positive
    """
    if tool is None:
        raise InvalidToolError("No tool resolved for pocketing")
    diameter = getattr(tool, 'diameter', None)
    if diameter is None:
        raise InvalidToolError(f"Tool {tool!r} has no diameter")
    if diameter <= 0:
        raise InvalidToolError(f"Tool diameter must be positive, got {diameter}")


def validate_resolution(resolution: float) -> None:
    """Raise ValueError for a non-positive scanline spacing."""
    if resolution is None or resolution <= 0:
        raise ValueError(f"Pocket resolution must be positive, got {resolution}")


def validate_material(material: MaterialExtent) -> None:
    """Raise ValueError for negative material height."""
    if material.height < 0:
        raise ValueError(f"Material height cannot be negative, got {material.height}")


def validate_grid_alignment(
    grid_a: 'PocketGrid',
    grid_b: 'PocketGrid',
    precision: float
) -> None:
    """
    Check that two grids sample the same scanlines.

    Subtraction pairs rows by index, so both grids need the same resolution,
    the same number of rows and matching row Y values.

    Raises:
        MismatchedGridsError: Describing the first mismatch found
    """
    if abs(grid_a.resolution - grid_b.resolution) > precision:
        raise MismatchedGridsError(
            f"Grid resolutions differ: {grid_a.resolution} vs {grid_b.resolution}"
        )
    if grid_a.row_count != grid_b.row_count:
        raise MismatchedGridsError(
            f"Grid row counts differ: {grid_a.row_count} vs {grid_b.row_count}"
        )
    for index, (row_a, row_b) in enumerate(zip(grid_a.rows, grid_b.rows)):
        if abs(row_a.y - row_b.y) > precision:
            raise MismatchedGridsError(
                f"Row {index} is at y={row_a.y:.4f} in one grid and "
                f"y={row_b.y:.4f} in the other"
            )


def validate_row_order(row: IntervalRow, precision: float) -> None:
    """
    Check that a row's intervals run left to right without overlapping.

    Raises:
        RowOrderError: On a reversed interval or an overlap with the previous one
    """
    previous_end = None
    for index, interval in enumerate(row.intervals):
        if interval.start > interval.end + precision:
            raise RowOrderError(
                f"Interval {index} on y={row.y:.4f} is reversed: "
                f"({interval.start:.4f}, {interval.end:.4f})"
            )
        if previous_end is not None and interval.start < previous_end - precision:
            raise RowOrderError(
                f"Interval {index} on y={row.y:.4f} starts at {interval.start:.4f}, "
                f"before the previous interval ends at {previous_end:.4f}"
            )
        previous_end = interval.end


def validate_stepdown(
    pass_depth: float,
    tool_diameter: float,
    max_stepdown_factor: float = 0.5
) -> Tuple[List[str], List[str]]:
    """
    Validate stepdown (pass depth) against tool diameter.

    - ERROR if pass_depth > tool_diameter (blocks generation)
    - WARNING if pass_depth > tool_diameter * max_stepdown_factor

    Args:
        pass_depth: Depth per pass
        tool_diameter: End mill diameter
        max_stepdown_factor: Maximum safe ratio of pass_depth to tool_diameter

    Returns:
        Tuple of (errors, warnings) lists
    """
    errors = []
    warnings = []

    if not pass_depth or pass_depth <= 0 or tool_diameter <= 0:
        return errors, warnings

    ratio = pass_depth / tool_diameter

    if ratio > 1.0:
        errors.append(
            f"Pass depth ({pass_depth:.4f}) exceeds tool diameter ({tool_diameter:.4f}). "
            f"Reduce pass depth before pocketing."
        )
    elif ratio > max_stepdown_factor:
        warnings.append(
            f"Pass depth ({pass_depth:.4f}) is {ratio * 100:.0f}% of tool diameter "
            f"({tool_diameter:.4f}). Recommended maximum is {max_stepdown_factor * 100:.0f}%."
        )

    return errors, warnings
