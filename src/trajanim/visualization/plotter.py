"""
Visualization tools for drawing static trajectory plots.
"""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.cm import ScalarMappable
from matplotlib.colors import to_rgba
from typing import Optional
import seaborn as sns

from .plot_spec import PlotSpec

# Set style for better plots
plt.style.use('default')
sns.set_palette("husl")


class TrajectoryPlotter:
    """Draws ``PlotSpec`` layers onto matplotlib axes."""

    def __init__(self, figsize: tuple = (8, 6), dpi: int = 100):
        self.figsize = figsize
        self.dpi = dpi

    def setup_axes(self, ax: plt.Axes, spec: PlotSpec, colorbar: bool = True):
        """Draw the parts of a plot that do not change between frames."""
        xlim, ylim = spec.data_limits()

        if spec.borders is not None:
            outlines = spec.borders.outlines
            for _, outline in outlines.groupby("group", sort=False):
                ax.plot(outline["long"], outline["lat"],
                        color=spec.borders.color,
                        linewidth=spec.borders.linewidth,
                        zorder=0)

        ax.set_xlim(*xlim)
        ax.set_ylim(*ylim)
        if spec.xlabel:
            ax.set_xlabel(spec.xlabel)
        if spec.ylabel:
            ax.set_ylabel(spec.ylabel)
        if spec.title:
            ax.set_title(spec.title)
        ax.grid(True, alpha=0.3)

        if colorbar and spec.points is not None and spec.points.color_scale is not None:
            scale = spec.points.color_scale
            mappable = ScalarMappable(norm=scale.norm(spec.data), cmap=scale.cmap())
            mappable.set_array([])
            ax.figure.colorbar(mappable, ax=ax, label=scale.column)

    def plot_trajectory(self, spec: PlotSpec,
                        save_path: Optional[str] = None, show: bool = False) -> plt.Figure:
        """Plot the complete trajectory as a still image."""
        fig, ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.setup_axes(ax, spec)

        positions = spec.positions()

        if spec.path is not None:
            ax.plot(positions[:, 0], positions[:, 1],
                    color=spec.path.color,
                    linewidth=spec.path.linewidth,
                    alpha=spec.path.alpha,
                    zorder=1)

        if spec.points is not None:
            ax.scatter(positions[:, 0], positions[:, 1],
                       c=spec.points.colors(spec.data),
                       s=spec.points.sizes(spec.data),
                       alpha=spec.points.alpha,
                       zorder=2)

        if spec.text is not None:
            rows = spec.data.tail(1) if spec.text.latest_only else spec.data
            for (_, row), (x, y) in zip(rows.iterrows(), positions[-len(rows):]):
                ax.annotate(spec.text.text(row), (x, y),
                            xytext=spec.text.offset, textcoords='offset points')

        # Mark start and end points
        ax.scatter(positions[0, 0], positions[0, 1],
                   c='green', s=80, marker='o', label='Start', zorder=3)
        ax.scatter(positions[-1, 0], positions[-1, 1],
                   c='red', s=80, marker='s', label='End', zorder=3)
        ax.legend()

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        if show:
            plt.show()

        return fig

    @staticmethod
    def frame_colors(spec: PlotSpec, default: str = 'tab:blue') -> np.ndarray:
        """Per-row RGBA colours of the point layer."""
        if spec.points is None:
            return np.tile(np.asarray(to_rgba(default)), (len(spec.data), 1))
        return spec.points.colors(spec.data)
