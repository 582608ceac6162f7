"""Multi-pass depth calculation utilities."""
import math
from typing import Iterator, List, Tuple


def calculate_num_passes(total_depth: float, pass_depth: float) -> int:
    """
    Calculate the number of depth passes needed to reach total_depth.

    A missing or non-positive pass depth means a single full-depth pass.
    """
    if not pass_depth or pass_depth <= 0:
        return 1
    return max(1, math.ceil(total_depth / pass_depth))


def calculate_pass_depths(total_depth: float, pass_depth: float) -> List[float]:
    """
    Calculate the cumulative depth reached by each pass.

    Passes are evenly sized, so the last one lands exactly on total_depth.

    Args:
        total_depth: Depth of the pocket below the material top
        pass_depth: Maximum depth removed by one pass

    Returns:
        List of cumulative (positive) depths, one per pass
    """
    num_passes = calculate_num_passes(total_depth, pass_depth)
    step = total_depth / num_passes
    return [(i + 1) * step for i in range(num_passes)]


def iter_passes(
    total_depth: float,
    pass_depth: float,
    top_z: float = 0.0
) -> Iterator[Tuple[int, float, float]]:
    """
    Iterate over depth passes as Z levels.

    Args:
        total_depth: Depth of the pocket below top_z
        pass_depth: Maximum depth removed by one pass
        top_z: Z of the material top

    Yields:
        Tuple of (pass_num, cut_z, rapid_z):
        - pass_num: Zero-indexed pass number
        - cut_z: Floor of this pass
        - rapid_z: Floor of the previous pass (top_z for the first), the
          lowest Z already cleared and therefore safe to rapid down to
    """
    rapid_z = top_z
    for pass_num, depth in enumerate(calculate_pass_depths(total_depth, pass_depth)):
        cut_z = top_z - depth
        yield pass_num, cut_z, rapid_z
        rapid_z = cut_z
