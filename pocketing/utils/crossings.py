"""Scanline crossing utilities: pooling, sorting, de-duplication and pairing."""
from typing import Iterable, List, Optional, Tuple

from ..errors import CapacityExceededError
from ..models import BoundaryPrimitive


def collect_crossings(
    boundary: Iterable[BoundaryPrimitive],
    y: float,
    max_crossings: int
) -> List[float]:
    """
    Pool the crossings of every boundary primitive on one scanline.

    Args:
        boundary: Boundary primitives, in any order
        y: Scanline Y coordinate
        max_crossings: Upper bound on pooled crossings for this scanline

    Returns:
        Unsorted list of crossing X coordinates

    Raises:
        CapacityExceededError: If the pool grows past max_crossings
    """
    crossings: List[float] = []
    for primitive in boundary:
        for x in primitive.crossings_at(y):
            if len(crossings) >= max_crossings:
                raise CapacityExceededError('crossings', max_crossings, y)
            crossings.append(float(x))
    return crossings


def remove_duplicate_scalars(values: List[float], precision: float) -> List[float]:
    """
    Drop values that lie within precision of the previously kept value.

    Args:
        values: Values sorted ascending
        precision: Tolerance for treating two values as equal

    Returns:
        New list with near-duplicates removed
    """
    unique: List[float] = []
    for value in values:
        if unique and value - unique[-1] <= precision:
            continue
        unique.append(value)
    return unique


def sort_crossings(crossings: List[float], precision: float) -> List[float]:
    """Sort crossings ascending and collapse near-duplicates."""
    return remove_duplicate_scalars(sorted(crossings), precision)


def pair_crossings(
    crossings: List[float]
) -> Tuple[List[Tuple[float, float]], Optional[float]]:
    """
    Pair sorted crossings with the even-odd rule.

    Material lies between crossing 2k and 2k+1.

    Args:
        crossings: Sorted, de-duplicated crossing X coordinates

    Returns:
        Tuple of (pairs, leftover) where leftover is the unpaired trailing
        crossing for an odd count, or None
    """
    pairs = [
        (crossings[i], crossings[i + 1])
        for i in range(0, len(crossings) - 1, 2)
    ]
    leftover = crossings[-1] if len(crossings) % 2 else None
    return pairs, leftover
