"""Render the track of a single historical storm (Hurricane Katrina by default).

The storm is selected from a storms CSV, drawn over optional map borders with
points coloured and sized by wind speed, and animated against its observation
time with a fading wake.
"""

from pathlib import Path
from typing import Optional

import pandas as pd

from trajanim.apps import setup_logging
from trajanim.data import clip_borders, load_borders, load_storms, select_storm
from trajanim.visualization import (
    AnimationBuilder,
    AnimationSpec,
    MatplotlibRenderer,
    PlotSpec,
    RenderSettings,
)

STORMS_CSV = "storms.csv"
OUTPUT_NAME = "katrina_trajectory_animation.gif"
MAP_MARGIN_DEG = 5.0


def build_animation(
    track: pd.DataFrame,
    borders: Optional[pd.DataFrame] = None,
    n_frames: int = 100,
    trail_alpha: float = 0.3,
    trail_color: Optional[str] = None,
    magnitude: str = "wind",
) -> AnimationSpec:
    """Time-indexed animation of a storm track with a trailing wake.

    Points are coloured and sized by the ``magnitude`` column.
    """
    name = track["name"].iloc[0]
    year = track["year"].iloc[0]

    spec = (
        PlotSpec(track, x="long", y="lat", time="date")
        .add_path(color="black", linewidth=1.0, alpha=0.6)
        .add_points(color_by=magnitude, size_by=magnitude, palette="rocket_r", size_range=(20, 250))
        .set_labels(title=f"{name} ({year})", xlabel="Longitude", ylabel="Latitude")
    )

    if borders is not None:
        xlim = (track["long"].min() - MAP_MARGIN_DEG, track["long"].max() + MAP_MARGIN_DEG)
        ylim = (track["lat"].min() - MAP_MARGIN_DEG, track["lat"].max() + MAP_MARGIN_DEG)
        spec.add_borders(clip_borders(borders, xlim, ylim), xlim=xlim, ylim=ylim)

    return (
        AnimationBuilder(spec)
        .time_indexed()
        .trail(wake_length=0.1, alpha=trail_alpha, color=trail_color)
        .title(f"{name} ({year})  {{frame_time:%Y-%m-%d %H:%M}}")
        .frames(n_frames)
        .build()
    )


def main(
    storms_csv=STORMS_CSV,
    output_dir=".",
    name: str = "Katrina",
    year: int = 2005,
    borders_csv=None,
    settings: Optional[RenderSettings] = None,
    trail_alpha: float = 0.3,
    trail_color: Optional[str] = None,
    magnitude: str = "wind",
) -> Path:
    logger = setup_logging()
    settings = settings or RenderSettings(fps=10, width=600, height=480)

    storms = load_storms(storms_csv)
    if magnitude not in storms.columns:
        raise ValueError(f"{storms_csv} has no magnitude column {magnitude!r}")
    track = select_storm(storms, name, year)
    logger.info(f"Peak {magnitude} of {name} ({year}): {track[magnitude].max()}")

    borders = load_borders(borders_csv) if borders_csv else None
    animation = build_animation(
        track,
        borders=borders,
        trail_alpha=trail_alpha,
        trail_color=trail_color,
        magnitude=magnitude,
    )

    return MatplotlibRenderer().render(animation, Path(output_dir) / OUTPUT_NAME, settings)


if __name__ == "__main__":
    main()
