"""Render the synthetic random-walk trajectory animations.

Four variants are written to the output directory:
    - trajectory_animation.gif: the path revealed point by point.
    - trajectory_animation_smooth.gif: more frames with cubic-in-out easing.
    - trajectory_animation_labels.gif: frame time in the title, head labelled.
    - trajectory_animation_shadow.gif: the current point with a fading wake.
"""

from pathlib import Path
from typing import Dict, Optional

from trajanim.apps import setup_logging
from trajanim.data import RandomWalkConfig, generate_random_walk
from trajanim.visualization import (
    AnimationBuilder,
    MatplotlibRenderer,
    PlotSpec,
    RenderSettings,
)


def build_plot(walk) -> PlotSpec:
    """Path through the walk with points coloured by time."""
    return (
        PlotSpec(walk, x="x", y="y", time="time")
        .add_path(color="grey", linewidth=1.0)
        .add_points(color_by="time", size=40, palette="viridis")
        .set_labels(title="Random walk trajectory", xlabel="X", ylabel="Y")
    )


def build_animations(
    walk,
    n_frames: int = 100,
    trail_alpha: float = 0.3,
    trail_color: Optional[str] = "grey",
) -> Dict[str, object]:
    """Animation specs keyed by output file name.

    ``trail_alpha`` and ``trail_color`` style the wake of the shadow variant.
    """
    animations = {}

    animations["trajectory_animation.gif"] = (
        AnimationBuilder(build_plot(walk)).reveal().frames(n_frames).build()
    )

    animations["trajectory_animation_smooth.gif"] = (
        AnimationBuilder(build_plot(walk))
        .reveal()
        .ease("cubic-in-out")
        .frames(2 * n_frames)
        .build()
    )

    labelled = build_plot(walk).add_point_labels("time", fmt="t = {value:.0f}")
    animations["trajectory_animation_labels.gif"] = (
        AnimationBuilder(labelled)
        .reveal()
        .title("Time: {frame_time:.0f}")
        .frames(n_frames)
        .build()
    )

    animations["trajectory_animation_shadow.gif"] = (
        AnimationBuilder(build_plot(walk))
        .time_indexed()
        .trail(wake_length=0.1, alpha=trail_alpha, color=trail_color)
        .frames(n_frames)
        .build()
    )
    return animations


def main(
    output_dir=".",
    config: Optional[RandomWalkConfig] = None,
    settings: Optional[RenderSettings] = None,
    trail_alpha: float = 0.3,
    trail_color: Optional[str] = "grey",
) -> Dict[str, Path]:
    logger = setup_logging()

    config = config or RandomWalkConfig()
    settings = settings or RenderSettings(fps=10, width=480, height=480)

    logger.info(
        f"Generating random walk: seed={config.seed}, n={config.n_points}, "
        f"mean={config.mean}, sd={config.sd}"
    )
    walk = generate_random_walk(config)

    renderer = MatplotlibRenderer()
    written = {}
    animations = build_animations(
        walk, n_frames=config.n_points, trail_alpha=trail_alpha, trail_color=trail_color
    )
    for file_name, animation in animations.items():
        written[file_name] = renderer.render(animation, Path(output_dir) / file_name, settings)

    logger.info(f"Wrote {len(written)} animations to {Path(output_dir).resolve()}")
    return written


if __name__ == "__main__":
    main()
