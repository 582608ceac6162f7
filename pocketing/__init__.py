"""Scanline pocketing for CNC toolpath generation."""

__version__ = "0.1.0"

from .errors import (
    PocketError,
    CapacityExceededError,
    MismatchedGridsError,
    DegenerateGeometryError,
    InvalidToolError,
    RowOrderError
)
from .models import (
    BoundaryPrimitive,
    Tool,
    MaterialExtent,
    Interval,
    IntervalRow
)
from .motions import (
    Comment,
    Retract,
    RapidMove,
    RapidPlunge,
    FeedDescend,
    FeedLine,
    MotionSink,
    MotionRecorder
)
from .pocket import PocketGrid
from .scan_builder import ScanBuilder, calculate_scanlines
from .subtractor import subtract_grids, subtract_row
from .motion_planner import MotionPlanner
from .gcode_writer import GCodeWriter
from .pocket_generator import (
    PocketGenerator,
    PocketSettings,
    CutParams,
    PocketResult
)

__all__ = [
    # Errors
    'PocketError',
    'CapacityExceededError',
    'MismatchedGridsError',
    'DegenerateGeometryError',
    'InvalidToolError',
    'RowOrderError',
    # Data model
    'BoundaryPrimitive',
    'Tool',
    'MaterialExtent',
    'Interval',
    'IntervalRow',
    'PocketGrid',
    # Motions
    'Comment',
    'Retract',
    'RapidMove',
    'RapidPlunge',
    'FeedDescend',
    'FeedLine',
    'MotionSink',
    'MotionRecorder',
    # Components
    'ScanBuilder',
    'calculate_scanlines',
    'subtract_grids',
    'subtract_row',
    'MotionPlanner',
    'GCodeWriter',
    # Main generator
    'PocketGenerator',
    'PocketSettings',
    'CutParams',
    'PocketResult',
]
