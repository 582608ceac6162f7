"""Motion events produced by the pocket planner and the sinks that receive them.

The planner is a pure producer: it hands each event to a MotionSink and never
looks at how the sink stores or serializes it. MotionRecorder keeps the events
in a list; GCodeWriter (see gcode_writer.py) renders them as G-code.
"""
from dataclasses import dataclass, field
from typing import List, Protocol, Union


@dataclass(frozen=True)
class Comment:
    """An annotation, e.g. the depth of the pass that follows."""
    text: str


@dataclass(frozen=True)
class Retract:
    """Rapid straight up to a safe Z."""
    z: float


@dataclass(frozen=True)
class RapidMove:
    """Rapid XY traverse at the current (safe) Z."""
    x: float
    y: float


@dataclass(frozen=True)
class RapidPlunge:
    """Rapid straight down to a Z that is known to be clear of material."""
    z: float


@dataclass(frozen=True)
class FeedDescend:
    """Straight down into material at plunge feed."""
    z: float


@dataclass(frozen=True)
class FeedLine:
    """Straight XY cut at cutting feed."""
    x: float
    y: float


Motion = Union[Comment, Retract, RapidMove, RapidPlunge, FeedDescend, FeedLine]


class MotionSink(Protocol):
    """Receiver for an ordered stream of motion events."""

    def emit(self, motion: Motion) -> None:
        """Accept the next motion event."""
        ...


@dataclass
class MotionRecorder:
    """Sink that keeps every motion in order."""
    motions: List[Motion] = field(default_factory=list)

    def emit(self, motion: Motion) -> None:
        self.motions.append(motion)

    def __len__(self) -> int:
        return len(self.motions)

    def of_type(self, motion_type) -> List[Motion]:
        """Return the recorded motions of one event type."""
        return [m for m in self.motions if isinstance(m, motion_type)]
