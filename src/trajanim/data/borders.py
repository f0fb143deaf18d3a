"""
Map border outlines for geographic trajectory plots.
Outlines use the ``map_data("world")`` layout: vertices in ``long``/``lat``,
one polyline per ``group``, drawn in row order (or by ``order`` if present).
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import pandas as pd

logger = logging.getLogger(__name__)

BORDER_COLUMNS = ["long", "lat", "group"]


def load_borders(path: Union[str, Path]) -> pd.DataFrame:
    """Load border outlines from a CSV file."""
    outlines = pd.read_csv(path)
    missing = [column for column in BORDER_COLUMNS if column not in outlines.columns]
    if missing:
        raise ValueError(f"{path} is missing required border columns: {missing}")
    if "order" in outlines.columns:
        outlines = outlines.sort_values(["group", "order"], kind="mergesort")
    logger.info(
        f"Loaded {outlines['group'].nunique()} border outlines from {path}"
    )
    return outlines.reset_index(drop=True)


def clip_borders(
    outlines: pd.DataFrame,
    xlim: Tuple[float, float],
    ylim: Tuple[float, float],
) -> pd.DataFrame:
    """Keep whole outlines that have at least one vertex inside the box."""
    inside = (
        outlines["long"].between(*xlim) & outlines["lat"].between(*ylim)
    )
    keep = outlines.loc[inside, "group"].unique()
    return outlines[outlines["group"].isin(keep)].reset_index(drop=True)
