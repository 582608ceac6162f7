import os
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .motions import FeedLine, Motion, RapidMove


def _collect_segments(motions: Sequence[Motion]):
    """Split a motion stream into cut segments and rapid traverses, as (x0, y0, x1, y1) rows."""
    cuts: List[List[float]] = []
    rapids: List[List[float]] = []
    position = None
    for motion in motions:
        if isinstance(motion, RapidMove):
            if position is not None:
                rapids.append([position[0], position[1], motion.x, motion.y])
            position = (motion.x, motion.y)
        elif isinstance(motion, FeedLine):
            if position is not None:
                cuts.append([position[0], position[1], motion.x, motion.y])
            position = (motion.x, motion.y)
    return np.array(cuts).reshape(-1, 4), np.array(rapids).reshape(-1, 4)


def plot_pocket_preview(motions: Sequence[Motion], output_file: Optional[str] = None,
                        title: str = "Pocket Toolpath Preview", dpi: int = 150,
                        font_size: int = 8, show: bool = False):
    """
    Plot the cuts and rapid traverses of a pocket motion stream.

    Args:
        motions: Motion events from the planner
        output_file: Optional path to save the plot
        title: Plot title
        dpi: Plot resolution
        font_size: Font size for labels
        show: Open an interactive window after drawing

    Returns:
        The matplotlib figure
    """
    cuts, rapids = _collect_segments(motions)
    fig, ax = plt.subplots(figsize=(10, 8), dpi=dpi)

    for i, (x0, y0, x1, y1) in enumerate(rapids):
        ax.plot([x0, x1], [y0, y1], linestyle=':', color='gray', linewidth=0.8,
                label="Rapid traverse" if i == 0 else "")

    for i, (x0, y0, x1, y1) in enumerate(cuts):
        ax.plot([x0, x1], [y0, y1], linestyle='-', color='blue', linewidth=2,
                label="Cut" if i == 0 else "")

    # Entry points
    if len(cuts):
        ax.plot(cuts[:, 0], cuts[:, 1], 'g.', markersize=4)

    ax.set_xlabel("X", fontsize=font_size + 2)
    ax.set_ylabel("Y", fontsize=font_size + 2)
    ax.set_title(title, fontsize=font_size + 4)
    if len(cuts) or len(rapids):
        ax.legend(fontsize=font_size)
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='datalim')
    ax.margins(0.1)

    cut_length = float(np.hypot(cuts[:, 2] - cuts[:, 0], cuts[:, 3] - cuts[:, 1]).sum())
    stats_text = (
        f"Pocket Summary:\n"
        f"• {len(cuts)} cuts\n"
        f"• {len(rapids)} rapid traverses\n"
        f"• {cut_length:.3f} total cut length"
    )
    ax.text(0.02, 0.02, stats_text, transform=ax.transAxes,
            fontsize=font_size, verticalalignment='bottom', horizontalalignment='left',
            bbox=dict(boxstyle="round,pad=0.5", facecolor="lightblue", alpha=0.8))

    plt.tight_layout()

    if output_file:
        fig.savefig(output_file, dpi=dpi, bbox_inches='tight')
        print(f"Plot saved to: {output_file}")

    if show:
        plt.show()

    return fig


def save_pocket_preview(motions: Sequence[Motion], base_filename: str,
                        output_dir: str = "output") -> str:
    """
    Save a pocket preview image to the output directory.

    Args:
        motions: Motion events from the planner
        base_filename: Base name for the output file (without extension)
        output_dir: Directory to write into (created if missing)

    Returns:
        Path of the saved image
    """
    os.makedirs(output_dir, exist_ok=True)
    plot_filename = os.path.join(output_dir, f"{base_filename}_preview.png")

    fig = plot_pocket_preview(motions, plot_filename, dpi=150, font_size=10)
    plt.close(fig)

    return plot_filename
