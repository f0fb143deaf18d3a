"""Data module for trajanim package.
This module produces the trajectory tables that get plotted:
    - Synthetic random walks drawn from an explicit pseudorandom generator.
    - Single-storm subsets of a historical storm observation table.
    - Map border outlines for geographic plots.
"""

from .random_walk import RandomWalkConfig, generate_random_walk
from .storms import (
    NoMatchingDataError,
    load_storms,
    reconstruct_timestamps,
    select_storm,
)
from .borders import load_borders, clip_borders

__all__ = [
    "RandomWalkConfig",
    "generate_random_walk",
    "NoMatchingDataError",
    "load_storms",
    "reconstruct_timestamps",
    "select_storm",
    "load_borders",
    "clip_borders",
]
