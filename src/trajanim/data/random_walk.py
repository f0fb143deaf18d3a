"""Random walk module
This module generates synthetic 2D trajectories as running sums of
normally distributed steps.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass
class RandomWalkConfig:
    """Parameters of a synthetic random walk."""

    n_points: int = 100
    mean: Tuple[float, float] = (0.5, 0.3)  # per-axis drift (x, y)
    sd: Tuple[float, float] = (0.3, 0.2)  # per-axis step noise (x, y)
    seed: int = 123

    def validate(self):
        """Raise ValueError when the parameters cannot produce a walk."""
        if isinstance(self.n_points, bool) or not isinstance(
            self.n_points, (int, np.integer)
        ):
            raise ValueError(f"n_points must be an integer, got {self.n_points!r}")
        if self.n_points <= 0:
            raise ValueError(f"n_points must be positive, got {self.n_points}")
        if len(self.mean) != 2 or len(self.sd) != 2:
            raise ValueError("mean and sd must each hold exactly two values (x, y)")
        if not np.all(np.isfinite(self.mean)):
            raise ValueError(f"mean must be finite, got {self.mean}")
        if not np.all(np.isfinite(self.sd)) or np.any(np.asarray(self.sd) < 0):
            raise ValueError(f"sd must be finite and non-negative, got {self.sd}")


def generate_random_walk(
    config: Optional[RandomWalkConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """
    Generate a 2D random walk.

    All x steps are drawn first, then all y steps, from the given generator.
    When no generator is passed a new one is seeded from ``config.seed``.

    Args:
        config: Walk parameters. Defaults to ``RandomWalkConfig()``.
        rng: Explicit pseudorandom generator to draw from.

    Returns:
        DataFrame with columns ``time`` (1..N), ``x`` and ``y``.
    """
    if config is None:
        config = RandomWalkConfig()
    config.validate()

    if rng is None:
        rng = np.random.default_rng(config.seed)

    n = int(config.n_points)
    x_steps = rng.normal(config.mean[0], config.sd[0], n)
    y_steps = rng.normal(config.mean[1], config.sd[1], n)

    walk = pd.DataFrame(
        {
            "time": np.arange(1, n + 1),
            "x": np.cumsum(x_steps),
            "y": np.cumsum(y_steps),
        }
    )
    logger.debug(
        f"Generated random walk with {n} points, "
        f"end position ({walk['x'].iloc[-1]:.3f}, {walk['y'].iloc[-1]:.3f})"
    )
    return walk
