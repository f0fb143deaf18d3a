"""This module provides the plotting and animation pipeline.
It includes:
    - A declarative plot specification builder (path, points, borders, labels).
    - Animation specifications with cumulative-reveal and time-indexed policies.
    - A static plotter and a GIF renderer backed by matplotlib.
"""

from .plot_spec import PlotSpec, ColorScale, SizeScale
from .animation import (
    EASINGS,
    get_easing,
    FrameState,
    AnimationPolicy,
    CumulativeReveal,
    TimeIndexed,
    AnimationSpec,
    AnimationBuilder,
)
from .plotter import TrajectoryPlotter
from .renderer import RenderSettings, RendererBase, MatplotlibRenderer

__all__ = [
    "PlotSpec",
    "ColorScale",
    "SizeScale",
    "EASINGS",
    "get_easing",
    "FrameState",
    "AnimationPolicy",
    "CumulativeReveal",
    "TimeIndexed",
    "AnimationSpec",
    "AnimationBuilder",
    "TrajectoryPlotter",
    "RenderSettings",
    "RendererBase",
    "MatplotlibRenderer",
]
