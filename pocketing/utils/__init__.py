"""Shared utility modules for pocket generation."""

from .crossings import (
    collect_crossings,
    remove_duplicate_scalars,
    sort_crossings,
    pair_crossings
)
from .tool_compensation import (
    get_stock_allowance,
    get_interval_offset,
    offset_interval,
    is_cuttable
)
from .multipass import calculate_num_passes, calculate_pass_depths, iter_passes
from .gcode_format import (
    format_coordinate,
    generate_header,
    generate_footer,
    generate_comment,
    generate_rapid_move,
    generate_linear_move
)
from .validators import (
    validate_tool,
    validate_resolution,
    validate_material,
    validate_grid_alignment,
    validate_row_order,
    validate_stepdown
)

__all__ = [
    # crossings
    'collect_crossings',
    'remove_duplicate_scalars',
    'sort_crossings',
    'pair_crossings',
    # tool_compensation
    'get_stock_allowance',
    'get_interval_offset',
    'offset_interval',
    'is_cuttable',
    # multipass
    'calculate_num_passes',
    'calculate_pass_depths',
    'iter_passes',
    # gcode_format
    'format_coordinate',
    'generate_header',
    'generate_footer',
    'generate_comment',
    'generate_rapid_move',
    'generate_linear_move',
    # validators
    'validate_tool',
    'validate_resolution',
    'validate_material',
    'validate_grid_alignment',
    'validate_row_order',
    'validate_stepdown',
]
