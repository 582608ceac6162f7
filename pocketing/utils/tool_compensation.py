"""Tool compensation for scanline intervals.

Pocket intervals are pulled in from the boundary so a later perimeter pass
has stock left to finish. Island intervals are pushed out by the same amount
so the pocket keeps the same distance from protected material.
"""
from typing import Tuple


def get_stock_allowance(tool_diameter: float, stock_factor: float = 0.1) -> float:
    """
    Get the finishing stock left on each side of a cut.

    Args:
        tool_diameter: Tool diameter
        stock_factor: Fraction of the diameter to leave

    Returns:
        Stock allowance per side
    """
    return stock_factor * tool_diameter


def get_interval_offset(
    tool_diameter: float,
    compensation: str,
    stock_factor: float = 0.1
) -> float:
    """
    Get the per-side offset applied to an interval.

    Args:
        tool_diameter: Tool diameter
        compensation: "interior" or "exterior"
        stock_factor: Fraction of the diameter to leave as stock

    Returns:
        Offset amount:
        - +allowance for 'interior' (shrink, pocket material)
        - -allowance for 'exterior' (grow, island material)

    Raises:
        ValueError: For any other compensation
    """
    allowance = get_stock_allowance(tool_diameter, stock_factor)
    if compensation == 'interior':
        return allowance
    elif compensation == 'exterior':
        return -allowance
    raise ValueError(f"Unknown compensation '{compensation}', expected 'interior' or 'exterior'")


def offset_interval(start: float, end: float, offset: float) -> Tuple[float, float]:
    """Move both ends of an interval toward its middle by offset (negative grows)."""
    return (start + offset, end - offset)


def is_cuttable(start: float, end: float, tool_diameter: float) -> bool:
    """
    Check whether a crossing pair is wide enough to rough out.

    Spans no wider than the tool are cleared by the perimeter pass alone.
    """
    return abs(end - start) > tool_diameter
