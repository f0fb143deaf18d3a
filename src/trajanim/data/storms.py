"""
Storm track loading and selection.
Storm observations are expected in the layout of the dplyr ``storms`` table:
one row per (name, year, month, day, hour) observation with the storm centre
in ``lat``/``long`` and magnitude columns such as ``wind`` and ``pressure``.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

STORM_COLUMNS = ["name", "year", "month", "day", "hour", "lat", "long"]
TIMESTAMP_COLUMNS = ["year", "month", "day", "hour"]


class NoMatchingDataError(LookupError):
    """Raised when a storm selection matches no rows."""


def _check_columns(frame: pd.DataFrame, required, source: str = "storms table"):
    missing = [column for column in required if column not in frame.columns]
    if missing:
        raise ValueError(f"{source} is missing required columns: {missing}")


def load_storms(path: Union[str, Path]) -> pd.DataFrame:
    """Load storm observations from a CSV file."""
    storms = pd.read_csv(path)
    _check_columns(storms, STORM_COLUMNS, source=str(path))
    logger.info(f"Loaded {len(storms)} storm observations from {path}")
    return storms


def reconstruct_timestamps(frame: pd.DataFrame) -> pd.Series:
    """Combine year, month, day and hour columns into a datetime series.

    Unparseable components raise the pandas ValueError unchanged.
    """
    _check_columns(frame, TIMESTAMP_COLUMNS)
    return pd.to_datetime(frame[TIMESTAMP_COLUMNS])


def select_storm(storms: pd.DataFrame, name: str, year: int) -> pd.DataFrame:
    """
    Select the observations of a single storm.

    Args:
        storms: Table of storm observations.
        name: Storm name, matched exactly.
        year: Season year, matched exactly.

    Returns:
        A copy of the matching rows sorted by a new ``date`` column.

    Raises:
        NoMatchingDataError: If no row matches both ``name`` and ``year``.
    """
    _check_columns(storms, STORM_COLUMNS)

    mask = (storms["name"] == name) & (storms["year"] == year)
    subset = storms.loc[mask].copy()
    if subset.empty:
        raise NoMatchingDataError(
            f"No observations found for storm {name!r} in {year}"
        )

    subset["date"] = reconstruct_timestamps(subset)
    subset = subset.sort_values("date", kind="mergesort").reset_index(drop=True)

    logger.info(
        f"Selected {len(subset)} observations of {name} ({year}) "
        f"from {subset['date'].iloc[0]} to {subset['date'].iloc[-1]}"
    )
    return subset
