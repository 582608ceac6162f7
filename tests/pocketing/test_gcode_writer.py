"""Tests for pocketing/gcode_writer.py module."""
import pytest

from pocketing import (
    Comment,
    FeedDescend,
    FeedLine,
    GCodeWriter,
    RapidMove,
    RapidPlunge,
    Retract
)


@pytest.fixture
def writer():
    """Writer with distinct feed and plunge rates."""
    return GCodeWriter(feed_rate=12.0, plunge_rate=2.0)


class TestGCodeWriter:
    """Tests for rendering motion events."""

    def test_retract_and_plunge_are_rapid_z(self, writer):
        """Test vertical rapids render as G00 Z."""
        writer.emit(Retract(0.25))
        writer.emit(RapidPlunge(-0.1))
        assert writer.lines == ["G00 Z0.2500", "G00 Z-0.1000"]

    def test_rapid_move(self, writer):
        """Test XY traverse renders as G00 X Y."""
        writer.emit(RapidMove(1.5, 2.0))
        assert writer.lines == ["G00 X1.5000 Y2.0000"]

    def test_feed_descend_uses_plunge_rate(self, writer):
        """Test descents use the plunge feed."""
        writer.emit(FeedDescend(-0.2))
        assert writer.lines == ["G01 Z-0.2000 F2.0"]

    def test_feed_line_uses_feed_rate(self, writer):
        """Test cuts use the cutting feed."""
        writer.emit(FeedLine(9.9, 3.0))
        assert writer.lines == ["G01 X9.9000 Y3.0000 F12.0"]

    def test_comment(self, writer):
        """Test comments are preceded by a blank line."""
        writer.emit(Comment("Pass depth: -0.1000"))
        assert writer.lines == ["", "(Pass depth: -0.1000)"]

    def test_comments_disabled(self):
        """Test comments can be left out for controllers that reject them."""
        writer = GCodeWriter(feed_rate=12.0, plunge_rate=2.0, include_comments=False)
        writer.emit(Comment("Pass depth: -0.1000"))
        assert writer.lines == []

    def test_precision(self):
        """Test coordinate precision is configurable."""
        writer = GCodeWriter(feed_rate=300.0, plunge_rate=100.0, precision=3)
        writer.emit(RapidMove(1.23456, 0.0))
        assert writer.lines == ["G00 X1.235 Y0.000"]

    def test_unknown_motion(self, writer):
        """Test unsupported events are refused."""
        with pytest.raises(TypeError):
            writer.emit("G00 X0")

    def test_program_wrapping(self, writer):
        """Test header and footer around rendered motions."""
        writer.start_program(10000, 0.5)
        writer.emit(Retract(0.25))
        writer.end_program(0.5)
        assert writer.render() == "\n".join([
            "G20 G90",
            "G00 Z0.5000",
            "M03 S10000",
            "G00 Z0.2500",
            "M05",
            "G00 Z0.5000",
            "M30",
        ])
