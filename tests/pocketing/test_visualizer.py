"""Tests for pocketing/visualizer.py module."""
import os

import matplotlib.pyplot as plt

from pocketing import FeedLine, MotionRecorder, PocketGrid, RapidMove, Retract
from pocketing.visualizer import _collect_segments, plot_pocket_preview, save_pocket_preview


def _square_motions(square, tool, material):
    grid = PocketGrid(1.0)
    grid.prepare(square, tool, material)
    recorder = MotionRecorder()
    grid.make(recorder, -0.1, 0.0, tool)
    return recorder.motions


class TestCollectSegments:
    """Tests for splitting motions into drawable segments."""

    def test_cuts_and_rapids(self):
        """Test a cut starts at the traverse end and rapids join cuts."""
        motions = [
            Retract(0.25),
            RapidMove(0.0, 0.0),
            FeedLine(5.0, 0.0),
            Retract(0.25),
            RapidMove(5.0, 1.0),
            FeedLine(0.0, 1.0),
        ]
        cuts, rapids = _collect_segments(motions)
        assert cuts.tolist() == [[0.0, 0.0, 5.0, 0.0], [5.0, 1.0, 0.0, 1.0]]
        assert rapids.tolist() == [[5.0, 0.0, 5.0, 1.0]]

    def test_empty(self):
        """Test no motions give empty arrays of the right shape."""
        cuts, rapids = _collect_segments([])
        assert cuts.shape == (0, 4)
        assert rapids.shape == (0, 4)

    def test_square_pocket(self, square, tool, material):
        """Test one cut per row of the square pocket."""
        cuts, rapids = _collect_segments(_square_motions(square, tool, material))
        assert cuts.shape == (11, 4)
        assert rapids.shape == (10, 4)


class TestPlotPocketPreview:
    """Tests for the preview plot."""

    def test_returns_figure(self, square, tool, material):
        """Test a figure is drawn without saving."""
        fig = plot_pocket_preview(_square_motions(square, tool, material))
        assert fig.axes[0].get_title() == "Pocket Toolpath Preview"
        plt.close(fig)

    def test_empty_motions(self):
        """Test an empty pocket still plots."""
        fig = plot_pocket_preview([])
        assert fig is not None
        plt.close(fig)

    def test_save_preview(self, tmp_path, square, tool, material):
        """Test the preview is written to the output directory."""
        output_dir = tmp_path / "previews"
        path = save_pocket_preview(
            _square_motions(square, tool, material), "square", output_dir=str(output_dir)
        )
        assert path == os.path.join(str(output_dir), "square_preview.png")
        assert os.path.getsize(path) > 0
