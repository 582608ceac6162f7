"""Pocket generation for scanline-cleared CNC pockets.

This module orchestrates a complete pocketing job:
- Scanning the outer boundary into a pocket grid
- Carving each island out of the grid
- Zig-zag motion planning for every depth pass
- Rendering the motions as G-code with header and footer
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .config import Config
from .errors import PocketError
from .gcode_writer import GCodeWriter
from .models import BoundaryPrimitive, MaterialExtent
from .motion_planner import MotionPlanner
from .motions import Motion, MotionRecorder
from .pocket import PocketGrid
from .scan_builder import ScanBuilder
from .utils.multipass import iter_passes
from .utils.validators import validate_resolution, validate_stepdown, validate_tool


@dataclass
class PocketSettings:
    """Settings needed for pocket generation."""
    resolution: float
    traverse_height: float = 0.25
    safety_height: float = 0.5
    max_crossings: int = 64
    max_intervals: int = 64
    precision: float = 1e-5
    stock_factor: float = 0.1
    strict_crossings: bool = False
    units: str = 'inch'  # 'inch' or 'mm'
    decimals: int = 4
    max_stepdown_factor: float = 0.5  # Warn if pass_depth > 50% of tool diameter

    @classmethod
    def from_config(cls, config=Config) -> 'PocketSettings':
        """Build settings from a Config class (environment-backed by default)."""
        return cls(
            resolution=config.RESOLUTION,
            traverse_height=config.TRAVERSE_HEIGHT,
            safety_height=config.SAFETY_HEIGHT,
            max_crossings=config.MAX_CROSSINGS,
            max_intervals=config.MAX_INTERVALS,
            precision=config.PRECISION,
            stock_factor=config.STOCK_FACTOR,
            strict_crossings=config.STRICT_CROSSINGS,
            units=config.UNITS,
            decimals=config.DECIMALS,
            max_stepdown_factor=config.MAX_STEPDOWN_FACTOR
        )


@dataclass
class CutParams:
    """Cutting parameters for the pocketing end mill."""
    spindle_speed: int
    feed_rate: float
    plunge_rate: float
    pass_depth: Optional[float] = None  # None cuts the full depth in one pass


@dataclass
class PocketResult:
    """Result of pocket generation."""
    gcode: str
    motions: List[Motion]
    row_count: int
    segment_count: int
    cut_count: int
    pass_depths: List[float]  # Z of each pass floor
    warnings: List[str]


class PocketGenerator:
    """Builds and cuts one pocket with a single resolved tool."""

    def __init__(self, settings: PocketSettings, tool, material: MaterialExtent):
        """
        Initialize the generator.

        Args:
            settings: Pocketing settings
            tool: Resolved tool (anything with a positive diameter)
            material: Vertical extent and origin of the stock

        Raises:
            InvalidToolError: If the tool diameter is not positive
            ValueError: If the resolution is not positive
        """
        validate_tool(tool)
        validate_resolution(settings.resolution)
        self.settings = settings
        self.tool = tool
        self.material = material
        self.builder = ScanBuilder.from_settings(settings)
        self.planner = MotionPlanner.from_settings(settings)
        self.warnings: List[str] = []

    def _new_grid(self) -> PocketGrid:
        return PocketGrid(self.settings.resolution, self.settings.max_intervals)

    def build_grid(
        self,
        boundary: Iterable[BoundaryPrimitive],
        islands: Sequence[Iterable[BoundaryPrimitive]] = ()
    ) -> PocketGrid:
        """
        Scan the boundary and subtract every island.

        Args:
            boundary: Outer boundary primitives
            islands: One boundary chain per island

        Returns:
            Populated pocket grid; the caller owns it and should dispose it
        """
        grid = self._new_grid()
        grid.prepare(boundary, self.tool, self.material, builder=self.builder)
        self.warnings.extend(grid.warnings)

        for number, island in enumerate(islands, start=1):
            island_grid = self._new_grid()
            island_grid.prepare(
                island, self.tool, self.material, builder=self.builder, island=True
            )
            self.warnings.extend(f"Island {number}: {w}" for w in island_grid.warnings)
            grid.subtract(island_grid, self.settings.precision)
            island_grid.dispose()

        return grid

    def generate(
        self,
        boundary: Iterable[BoundaryPrimitive],
        params: CutParams,
        material_depth: float,
        islands: Sequence[Iterable[BoundaryPrimitive]] = (),
        top_z: float = 0.0
    ) -> PocketResult:
        """
        Generate the complete pocket program.

        Args:
            boundary: Outer boundary primitives
            params: Spindle, feed and stepdown for the end mill
            material_depth: Pocket depth below top_z
            islands: One boundary chain per island
            top_z: Z of the material top

        Returns:
            PocketResult with G-code, motions and warnings

        Raises:
            ValueError: If material_depth is not positive
            PocketError: If the stepdown is unsafe for the tool, or the
                build fails (capacity, degenerate geometry, mismatched grids)
        """
        if material_depth <= 0:
            raise ValueError(f"Pocket depth must be positive, got {material_depth}")

        self.warnings = []
        errors, stepdown_warnings = validate_stepdown(
            params.pass_depth or material_depth,
            self.tool.diameter,
            self.settings.max_stepdown_factor
        )
        if errors:
            raise PocketError(" ".join(errors))
        self.warnings.extend(stepdown_warnings)

        grid = self.build_grid(boundary, islands)
        if grid.is_empty:
            self.warnings.append(
                f"Nothing to pocket: no span is wider than the {self.tool.diameter} tool"
            )

        recorder = MotionRecorder()
        pass_depths = []
        cut_count = 0
        for _, cut_z, rapid_z in iter_passes(material_depth, params.pass_depth, top_z):
            cut_count += self.planner.make(grid, recorder, cut_z, rapid_z, self.tool)
            pass_depths.append(cut_z)

        writer = GCodeWriter(
            feed_rate=params.feed_rate,
            plunge_rate=params.plunge_rate,
            precision=self.settings.decimals
        )
        writer.start_program(params.spindle_speed, self.settings.safety_height, self.settings.units)
        for motion in recorder.motions:
            writer.emit(motion)
        writer.end_program(self.settings.safety_height)

        result = PocketResult(
            gcode=writer.render(),
            motions=list(recorder.motions),
            row_count=grid.row_count,
            segment_count=grid.segment_count,
            cut_count=cut_count,
            pass_depths=pass_depths,
            warnings=list(self.warnings)
        )
        grid.dispose()
        return result
