import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Pocketing defaults, overridable from the environment or a .env file."""

    # Scanline spacing (same units as the boundary geometry)
    RESOLUTION = float(os.environ.get('POCKET_RESOLUTION', 0.05))

    # Z heights
    TRAVERSE_HEIGHT = float(os.environ.get('POCKET_TRAVERSE_HEIGHT', 0.25))
    SAFETY_HEIGHT = float(os.environ.get('POCKET_SAFETY_HEIGHT', 0.5))

    # Per-scanline bounds; exceeding either aborts the build
    MAX_CROSSINGS = int(os.environ.get('POCKET_MAX_CROSSINGS', 64))
    MAX_INTERVALS = int(os.environ.get('POCKET_MAX_INTERVALS', 64))

    # Tolerance for duplicate crossings, overlap tests and depth comparisons
    PRECISION = float(os.environ.get('POCKET_PRECISION', 1e-5))

    # Fraction of tool diameter left as stock on each side of a cut
    STOCK_FACTOR = float(os.environ.get('POCKET_STOCK_FACTOR', 0.1))

    # Odd crossing counts abort the build instead of producing a warning
    STRICT_CROSSINGS = _env_flag('POCKET_STRICT_CROSSINGS')

    # G-code output
    UNITS = os.environ.get('POCKET_UNITS', 'inch')  # 'inch' or 'mm'
    DECIMALS = int(os.environ.get('POCKET_DECIMALS', 4))
    MAX_STEPDOWN_FACTOR = float(os.environ.get('POCKET_MAX_STEPDOWN_FACTOR', 0.5))
