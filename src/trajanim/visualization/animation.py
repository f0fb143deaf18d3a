"""
Animation specification for trajectory plots.

An ``AnimationSpec`` pairs a static ``PlotSpec`` with a visibility policy and
a frame timeline. For every output frame it yields a ``FrameState`` telling
the renderer which rows are visible, how opaque each one is and where the
interpolated head of the trajectory sits.

Two policies exist and they are mutually exclusive per animation:
    - ``CumulativeReveal``: every point up to the frame time stays visible.
    - ``TimeIndexed``: only the current state is shown, optionally followed
      by a fading wake of recent points.
A wake on a cumulative reveal would only fade points that are already fully
visible, so ``AnimationBuilder`` logs a warning and drops it.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

import numpy as np
import pandas as pd
from overrides import override

from .plot_spec import PlotSpec

logger = logging.getLogger(__name__)


def _linear(p: float) -> float:
    return p


def _quadratic_in_out(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return 1 - (-2 * p + 2) ** 2 / 2


def _cubic_in_out(p: float) -> float:
    if p < 0.5:
        return 4 * p ** 3
    return 1 - (-2 * p + 2) ** 3 / 2


def _sine_in_out(p: float) -> float:
    return -(math.cos(math.pi * p) - 1) / 2


def _exponential_in_out(p: float) -> float:
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return 1.0
    if p < 0.5:
        return 2 ** (20 * p - 10) / 2
    return (2 - 2 ** (-20 * p + 10)) / 2


EASINGS: Dict[str, Callable[[float], float]] = {
    "linear": _linear,
    "quadratic-in-out": _quadratic_in_out,
    "cubic-in-out": _cubic_in_out,
    "sine-in-out": _sine_in_out,
    "exponential-in-out": _exponential_in_out,
}


def get_easing(name: str) -> Callable[[float], float]:
    """Look up an easing function by name."""
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing {name!r}, expected one of {sorted(EASINGS)}"
        ) from None


@dataclass
class FrameState:
    """What a single output frame shows."""

    time: float
    indices: np.ndarray  # visible rows, in row order
    alphas: np.ndarray  # opacity per visible row
    trail: np.ndarray  # True where the row is part of a fading wake
    head: Optional[Tuple[float, float]] = None  # interpolated (x, y) at ``time``
    head_segment: Optional[Tuple[int, float]] = None  # (row, fraction towards row + 1)


class AnimationPolicy(ABC):
    """Decides which rows are visible at a given frame time."""

    trail_color: Optional[str] = None

    def __init__(self, interpolate_head: bool = True):
        self.interpolate_head = interpolate_head

    @abstractmethod
    def visible(self, times: np.ndarray, t: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (indices, alphas, trail mask) for frame time ``t``."""
        raise NotImplementedError("This method should be overridden by subclasses.")

    @staticmethod
    def _latest(times: np.ndarray, t: float) -> int:
        """Index of the last row with time <= t, or -1 if none."""
        return int(np.searchsorted(times, t, side="right")) - 1


class CumulativeReveal(AnimationPolicy):
    """Every point with time <= t is visible at full opacity."""

    @override
    def visible(self, times: np.ndarray, t: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        indices = np.flatnonzero(times <= t)
        alphas = np.ones(len(indices))
        trail = np.zeros(len(indices), dtype=bool)
        return indices, alphas, trail


class TimeIndexed(AnimationPolicy):
    """Shows the state at time t with an optional fading wake.

    Without a window only the latest row is visible. With a window, only rows
    aged ``0 <= t - time < window`` are visible; the newest of them at full
    opacity and older ones at ``trail_alpha * (1 - age / window)``. Between
    sparse keyframes this can leave no row visible while the interpolated
    head keeps moving.
    """

    def __init__(
        self,
        window: Optional[float] = None,
        trail_alpha: float = 0.3,
        trail_color: Optional[str] = None,
        interpolate_head: bool = True,
    ):
        super().__init__(interpolate_head=interpolate_head)
        if window is not None and window < 0:
            raise ValueError(f"Trail window must be non-negative, got {window}")
        if not 0.0 < trail_alpha <= 1.0:
            raise ValueError(f"Trail alpha must be in (0, 1], got {trail_alpha}")
        self.window = window
        self.trail_alpha = trail_alpha
        self.trail_color = trail_color

    @classmethod
    def from_wake_length(
        cls,
        wake_length: float,
        span: float,
        trail_alpha: float = 0.3,
        trail_color: Optional[str] = None,
        interpolate_head: bool = True,
    ) -> "TimeIndexed":
        """Size the wake as a fraction of the total time span."""
        if not 0.0 <= wake_length <= 1.0:
            raise ValueError(f"Wake length must be in [0, 1], got {wake_length}")
        return cls(
            window=wake_length * span,
            trail_alpha=trail_alpha,
            trail_color=trail_color,
            interpolate_head=interpolate_head,
        )

    @override
    def visible(self, times: np.ndarray, t: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        latest = self._latest(times, t)
        if latest < 0:
            empty = np.array([], dtype=int)
            return empty, np.array([]), np.array([], dtype=bool)

        if not self.window:
            return np.array([latest]), np.ones(1), np.zeros(1, dtype=bool)

        age = t - times[: latest + 1]
        indices = np.flatnonzero(age < self.window)
        if indices.size == 0:
            return indices, np.array([]), np.array([], dtype=bool)
        age = age[indices]

        alphas = self.trail_alpha * (1.0 - age / self.window)
        alphas[-1] = 1.0
        trail = np.ones(len(indices), dtype=bool)
        trail[-1] = False
        return indices, alphas, trail


class AnimationSpec:
    """A plot, a visibility policy and a frame timeline."""

    def __init__(
        self,
        plot: PlotSpec,
        policy: AnimationPolicy,
        n_frames: int = 100,
        easing: str = "linear",
        title_template: Optional[str] = None,
    ):
        self.plot = plot
        self.policy = policy
        self.n_frames = self._check_frames(n_frames)
        self.easing = easing
        self._ease = get_easing(easing)
        self.title_template = title_template

        self._times = plot.times()
        self._positions = plot.positions()
        if np.any(np.diff(self._times) < 0):
            raise ValueError(
                f"Column {plot.time!r} must be non-decreasing to be animated"
            )

    @staticmethod
    def _check_frames(n_frames) -> int:
        if isinstance(n_frames, bool) or not isinstance(n_frames, (int, np.integer)):
            raise ValueError(f"Frame count must be an integer, got {n_frames!r}")
        if n_frames < 1:
            raise ValueError(f"Frame count must be positive, got {n_frames}")
        return int(n_frames)

    @property
    def is_datetime(self) -> bool:
        return pd.api.types.is_datetime64_any_dtype(self.plot.data[self.plot.time])

    @property
    def time_span(self) -> Tuple[float, float]:
        return float(self._times[0]), float(self._times[-1])

    def frame_times(self, n_frames: Optional[int] = None) -> np.ndarray:
        """Eased frame times from the first to the last point time."""
        n = self.n_frames if n_frames is None else self._check_frames(n_frames)
        start, end = self.time_span
        if n == 1:
            return np.array([end])
        progress = np.array([self._ease(p) for p in np.linspace(0.0, 1.0, n)])
        return start + progress * (end - start)

    def frame_state(self, t: float) -> FrameState:
        indices, alphas, trail = self.policy.visible(self._times, t)
        state = FrameState(time=t, indices=indices, alphas=alphas, trail=trail)

        latest = self.policy._latest(self._times, t)
        if self.policy.interpolate_head and latest >= 0:
            fraction = 0.0
            if latest + 1 < len(self._times):
                t0, t1 = self._times[latest], self._times[latest + 1]
                if t1 > t0:
                    fraction = float(np.clip((t - t0) / (t1 - t0), 0.0, 1.0))
            position = self._positions[latest]
            if fraction > 0.0:
                position = position + fraction * (self._positions[latest + 1] - position)
            state.head = (float(position[0]), float(position[1]))
            state.head_segment = (latest, fraction)
        return state

    def frames(self, n_frames: Optional[int] = None) -> Iterator[FrameState]:
        for t in self.frame_times(n_frames):
            yield self.frame_state(float(t))

    def format_time(self, t: float):
        """Convert a frame time back to the time column's own type."""
        if self.is_datetime:
            return pd.to_datetime(t, unit="s")
        return t

    def frame_title(self, t: float) -> Optional[str]:
        if self.title_template is None:
            return self.plot.title
        return self.title_template.format(frame_time=self.format_time(t))


class AnimationBuilder:
    """Fluent construction of an ``AnimationSpec``::

        animation = (
            AnimationBuilder(spec)
            .time_indexed()
            .trail(wake_length=0.1, alpha=0.3)
            .frames(120)
            .build()
        )
    """

    def __init__(self, plot: PlotSpec):
        self._plot = plot
        self._kind = "reveal"
        self._interpolate_head = True
        self._trail = None
        self._easing = "linear"
        self._n_frames = 100
        self._title = None

    def reveal(self, interpolate_head: bool = True) -> "AnimationBuilder":
        self._kind = "reveal"
        self._interpolate_head = interpolate_head
        return self

    def time_indexed(self, interpolate_head: bool = True) -> "AnimationBuilder":
        self._kind = "time"
        self._interpolate_head = interpolate_head
        return self

    def trail(
        self, wake_length: float = 0.1, alpha: float = 0.3, color: Optional[str] = None
    ) -> "AnimationBuilder":
        self._trail = {"wake_length": wake_length, "trail_alpha": alpha, "trail_color": color}
        return self

    def ease(self, name: str) -> "AnimationBuilder":
        get_easing(name)
        self._easing = name
        return self

    def frames(self, n_frames: int) -> "AnimationBuilder":
        self._n_frames = AnimationSpec._check_frames(n_frames)
        return self

    def title(self, template: str) -> "AnimationBuilder":
        self._title = template
        return self

    def build(self) -> AnimationSpec:
        if self._kind == "reveal":
            if self._trail is not None:
                logger.warning(
                    "Trail requested on a cumulative reveal: all past points are "
                    "already visible, the trail is ignored"
                )
            policy = CumulativeReveal(interpolate_head=self._interpolate_head)
        elif self._trail is not None:
            times = self._plot.times()
            policy = TimeIndexed.from_wake_length(
                span=float(times.max() - times.min()),
                interpolate_head=self._interpolate_head,
                **self._trail,
            )
        else:
            policy = TimeIndexed(interpolate_head=self._interpolate_head)

        logger.debug(
            f"Built {type(policy).__name__} animation with {self._n_frames} frames "
            f"and {self._easing} easing"
        )
        return AnimationSpec(
            self._plot,
            policy,
            n_frames=self._n_frames,
            easing=self._easing,
            title_template=self._title,
        )
