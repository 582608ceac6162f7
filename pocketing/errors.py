"""Exception types raised while building and cutting a pocket."""


class PocketError(Exception):
    """Base exception for pocketing failures."""
    pass


class CapacityExceededError(PocketError):
    """A scanline produced more crossings or intervals than the configured bound."""

    def __init__(self, what: str, limit: int, y: float):
        self.what = what
        self.limit = limit
        self.y = y
        super().__init__(
            f"Too many {what} on scanline y={y:.4f} (limit is {limit})"
        )


class MismatchedGridsError(PocketError):
    """Two pocket grids do not share resolution, extent and row layout."""
    pass


class DegenerateGeometryError(PocketError):
    """Boundary produced an odd number of crossings on a scanline."""
    pass


class InvalidToolError(PocketError):
    """Tool is missing or has a non-positive diameter."""
    pass


class RowOrderError(PocketError):
    """Intervals in a row are out of order or overlap."""
    pass
