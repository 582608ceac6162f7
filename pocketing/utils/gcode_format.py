"""G-code formatting helpers used by the G-code writer sink."""
from typing import List, Optional

UNIT_CODES = {
    'inch': 'G20',
    'mm': 'G21',
}


def format_coordinate(value: float, precision: int = 4) -> str:
    """Format a coordinate with a fixed number of decimals, never as -0.0000."""
    text = f"{value:.{precision}f}"
    if text.startswith('-') and float(text) == 0:
        return text[1:]
    return text


def generate_header(
    spindle_speed: int,
    safety_height: float,
    units: str = 'inch',
    precision: int = 4
) -> List[str]:
    """
    Generate program start lines.

    Args:
        spindle_speed: Spindle RPM
        safety_height: Z height to move to before the spindle starts
        units: 'inch' or 'mm'
        precision: Decimal places for coordinates

    Returns:
        List of G-code header lines

    Raises:
        ValueError: For unknown units
    """
    if units not in UNIT_CODES:
        raise ValueError(f"Unknown units '{units}', expected one of {sorted(UNIT_CODES)}")
    return [
        f"{UNIT_CODES[units]} G90",
        f"G00 Z{format_coordinate(safety_height, precision)}",
        f"M03 S{spindle_speed}",
    ]


def generate_footer(safety_height: float, precision: int = 4) -> List[str]:
    """Generate program end lines: spindle off, retract, end of program."""
    return [
        "M05",
        f"G00 Z{format_coordinate(safety_height, precision)}",
        "M30",
    ]


def generate_comment(text: str) -> str:
    """Wrap text as a G-code comment, dropping parentheses that would end it early."""
    cleaned = text.replace('(', '').replace(')', '')
    return f"({cleaned})"


def generate_rapid_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    precision: int = 4
) -> str:
    """Generate a G00 rapid move with only the given axes."""
    parts = ["G00"]
    if x is not None:
        parts.append(f"X{format_coordinate(x, precision)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y, precision)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z, precision)}")
    return " ".join(parts)


def generate_linear_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    feed: Optional[float] = None,
    precision: int = 4
) -> str:
    """Generate a G01 feed move with only the given axes and an optional F word."""
    parts = ["G01"]
    if x is not None:
        parts.append(f"X{format_coordinate(x, precision)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y, precision)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z, precision)}")
    if feed is not None:
        parts.append(f"F{format_coordinate(feed, 1)}")
    return " ".join(parts)
