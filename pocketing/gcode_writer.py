"""Motion sink that renders pocket motions as G-code lines."""
from dataclasses import dataclass, field
from typing import List

from .motions import (
    Comment,
    FeedDescend,
    FeedLine,
    Motion,
    RapidMove,
    RapidPlunge,
    Retract
)
from .utils.gcode_format import (
    generate_comment,
    generate_footer,
    generate_header,
    generate_linear_move,
    generate_rapid_move
)


@dataclass
class GCodeWriter:
    """Collects G-code for a motion stream.

    Attributes:
        feed_rate: Feed for XY cuts
        plunge_rate: Feed for descents into material
        precision: Decimal places for coordinates
        include_comments: Write Comment events as (text) lines
        lines: Rendered G-code, one command per entry
    """
    feed_rate: float
    plunge_rate: float
    precision: int = 4
    include_comments: bool = True
    lines: List[str] = field(default_factory=list)

    def emit(self, motion: Motion) -> None:
        """Render one motion event."""
        if isinstance(motion, Comment):
            if self.include_comments:
                self.lines.append("")
                self.lines.append(generate_comment(motion.text))
        elif isinstance(motion, (Retract, RapidPlunge)):
            self.lines.append(generate_rapid_move(z=motion.z, precision=self.precision))
        elif isinstance(motion, RapidMove):
            self.lines.append(
                generate_rapid_move(x=motion.x, y=motion.y, precision=self.precision)
            )
        elif isinstance(motion, FeedDescend):
            self.lines.append(
                generate_linear_move(z=motion.z, feed=self.plunge_rate, precision=self.precision)
            )
        elif isinstance(motion, FeedLine):
            self.lines.append(
                generate_linear_move(
                    x=motion.x, y=motion.y, feed=self.feed_rate, precision=self.precision
                )
            )
        else:
            raise TypeError(f"Unsupported motion event: {motion!r}")

    def start_program(self, spindle_speed: int, safety_height: float, units: str = 'inch') -> None:
        """Write the program header."""
        self.lines.extend(generate_header(spindle_speed, safety_height, units, self.precision))

    def end_program(self, safety_height: float) -> None:
        """Write the program footer."""
        self.lines.extend(generate_footer(safety_height, self.precision))

    def render(self) -> str:
        return '\n'.join(self.lines)
