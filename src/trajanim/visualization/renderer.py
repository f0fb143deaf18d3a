"""Renderer module
This module turns an ``AnimationSpec`` into an animated GIF.
It includes:
    - ``RenderSettings``, the output parameters (frame rate, frame count, size).
    - ``RendererBase``, the interface every rendering backend implements.
    - ``MatplotlibRenderer``, which draws frames with matplotlib and encodes
      them with Pillow.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.colors import to_rgba
from matplotlib.text import Text
from overrides import override

from .animation import AnimationSpec, FrameState
from .plotter import TrajectoryPlotter

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Output parameters of a rendered animation."""

    fps: float = 10.0
    duration: Optional[float] = None  # seconds, used when n_frames is unset
    n_frames: Optional[int] = None
    width: int = 480  # pixels
    height: int = 480  # pixels
    dpi: int = 100

    def validate(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.duration is not None and self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.n_frames is not None and (
            isinstance(self.n_frames, bool)
            or not isinstance(self.n_frames, (int, np.integer))
            or self.n_frames < 1
        ):
            raise ValueError(f"n_frames must be a positive integer, got {self.n_frames!r}")
        for name in ("width", "height", "dpi"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    def frame_count(self, default: int) -> int:
        """Explicit frame count, else fps * duration, else ``default``."""
        self.validate()
        if self.n_frames is not None:
            return int(self.n_frames)
        if self.duration is not None:
            return max(1, int(round(self.fps * self.duration)))
        return default

    @property
    def figsize(self) -> tuple:
        return (self.width / self.dpi, self.height / self.dpi)


class RendererBase(ABC):
    """Base class for animation renderers."""

    @abstractmethod
    def render(
        self,
        animation: AnimationSpec,
        output_path: Union[str, Path],
        settings: Optional[RenderSettings] = None,
    ) -> Path:
        """Render ``animation`` to ``output_path`` and return the written path."""
        raise NotImplementedError("This method should be implemented by subclasses.")


class _FrameArtists:
    """Matplotlib artists updated in place for every frame."""

    def __init__(self, ax: plt.Axes, animation: AnimationSpec):
        self.ax = ax
        self.animation = animation
        spec = animation.plot

        self.positions = spec.positions()
        self.colors = TrajectoryPlotter.frame_colors(spec)
        if spec.points is not None:
            self.sizes = spec.points.sizes(spec.data)
            self.base_alpha = spec.points.alpha
        else:
            self.sizes = np.full(len(spec.data), 40.0)
            self.base_alpha = 1.0

        trail_color = animation.policy.trail_color
        self.trail_rgba = np.asarray(to_rgba(trail_color)) if trail_color else None

        self.path = None
        if spec.path is not None:
            (self.path,) = ax.plot([], [],
                                   color=spec.path.color,
                                   linewidth=spec.path.linewidth,
                                   alpha=spec.path.alpha,
                                   zorder=1)
        self.points = None
        if spec.points is not None:
            self.points = ax.scatter([], [], zorder=2)
        self.head = ax.scatter([], [], zorder=3)
        self.texts: List[Text] = []

    def update(self, state: FrameState):
        visible = self.positions[state.indices]
        path_xy = visible
        if state.head is not None:
            path_xy = np.vstack([visible, np.asarray(state.head)[None, :]])

        if self.path is not None:
            self.path.set_data(path_xy[:, 0], path_xy[:, 1])

        if self.points is not None:
            rgba = self.colors[state.indices].copy()
            if self.trail_rgba is not None and state.trail.any():
                rgba[state.trail] = self.trail_rgba
            rgba[:, 3] = rgba[:, 3] * state.alphas * self.base_alpha
            self.points.set_offsets(visible.reshape(-1, 2))
            self.points.set_facecolors(rgba)
            self.points.set_edgecolors('none')
            self.points.set_sizes(self.sizes[state.indices])

        if state.head is not None and state.head_segment is not None:
            row, fraction = state.head_segment
            color = self.colors[row]
            size = self.sizes[row]
            if fraction > 0.0:
                color = color + fraction * (self.colors[row + 1] - color)
                size = size + fraction * (self.sizes[row + 1] - size)
            self.head.set_offsets(np.asarray(state.head)[None, :])
            self.head.set_facecolors(color[None, :])
            self.head.set_sizes([size])
        else:
            self.head.set_offsets(np.empty((0, 2)))

        self._update_texts(state)

        title = self.animation.frame_title(state.time)
        if title:
            self.ax.set_title(title)

        return [a for a in (self.path, self.points, self.head) if a is not None] + self.texts

    def _update_texts(self, state: FrameState):
        layer = self.animation.plot.text
        for text in self.texts:
            text.remove()
        self.texts = []
        if layer is None or len(state.indices) == 0:
            return

        data = self.animation.plot.data
        rows = state.indices[-1:] if layer.latest_only else state.indices
        for row in rows:
            xy = self.positions[row]
            if row == state.indices[-1] and state.head is not None:
                xy = state.head
            self.texts.append(
                self.ax.annotate(layer.text(data.iloc[row]), tuple(xy),
                                 xytext=layer.offset, textcoords='offset points')
            )


class MatplotlibRenderer(RendererBase):
    """Renders animations with matplotlib and writes GIFs through Pillow."""

    def __init__(self, plotter: Optional[TrajectoryPlotter] = None):
        self.plotter = plotter or TrajectoryPlotter()

    def _figure(self, animation: AnimationSpec, settings: RenderSettings):
        fig, ax = plt.subplots(figsize=settings.figsize, dpi=settings.dpi)
        self.plotter.setup_axes(ax, animation.plot)
        return fig, ax, _FrameArtists(ax, animation)

    def render_frame(
        self,
        animation: AnimationSpec,
        t: float,
        settings: Optional[RenderSettings] = None,
        save_path: Optional[Union[str, Path]] = None,
    ) -> plt.Figure:
        """Draw a single frame at time ``t`` as a still figure."""
        settings = settings or RenderSettings()
        settings.validate()
        fig, _, artists = self._figure(animation, settings)
        artists.update(animation.frame_state(t))
        if save_path:
            fig.savefig(save_path, dpi=settings.dpi)
        return fig

    @override
    def render(
        self,
        animation: AnimationSpec,
        output_path: Union[str, Path],
        settings: Optional[RenderSettings] = None,
    ) -> Path:
        settings = settings or RenderSettings()
        n_frames = settings.frame_count(default=animation.n_frames)
        frame_times = animation.frame_times(n_frames)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(
            f"Rendering {n_frames} frames at {settings.fps} fps "
            f"({settings.width}x{settings.height}px) to {output_path}"
        )

        fig, _, artists = self._figure(animation, settings)
        try:
            anim = FuncAnimation(
                fig,
                lambda t: artists.update(animation.frame_state(float(t))),
                frames=frame_times,
                interval=1000.0 / settings.fps,
                blit=False,
                repeat=False,
            )
            anim.save(str(output_path), writer=PillowWriter(fps=settings.fps), dpi=settings.dpi)
        finally:
            plt.close(fig)

        logger.info(f"Saved animation to {output_path}")
        return output_path
