"""
Example script demonstrating how to plot and animate your own trajectory
with the trajanim plot and animation builders.
"""

import numpy as np
import pandas as pd

from trajanim.apps import setup_logging
from trajanim.visualization import (
    AnimationBuilder,
    MatplotlibRenderer,
    PlotSpec,
    RenderSettings,
    TrajectoryPlotter,
)


def main():
    """Render a still and a GIF of a spiral trajectory."""
    print("=" * 60)
    print("trajanim Custom Trajectory Example")
    print("=" * 60)
    setup_logging()

    # Any ordered table with a time column and two coordinates works
    print("\n1. Building trajectory table...")
    t = np.linspace(0, 4 * np.pi, 80)
    spiral = pd.DataFrame({"t": t, "x": t * np.cos(t), "y": t * np.sin(t), "speed": np.hypot(1, t)})

    print("\n2. Describing the plot...")
    spec = (
        PlotSpec(spiral, x="x", y="y", time="t")
        .add_path(color="grey")
        .add_points(color_by="speed", size_by="speed", palette="mako")
        .set_labels(title="Spiral")
    )

    print("\n3. Saving a static plot...")
    TrajectoryPlotter().plot_trajectory(spec, save_path="spiral.png")
    print("[OK] Saved spiral.png")

    print("\n4. Rendering the animation...")
    animation = (
        AnimationBuilder(spec)
        .time_indexed()
        .trail(wake_length=0.25, alpha=0.5)
        .ease("sine-in-out")
        .title("t = {frame_time:.2f}")
        .build()
    )
    MatplotlibRenderer().render(animation, "spiral.gif", RenderSettings(fps=15, duration=6))
    print("[OK] Saved spiral.gif")


if __name__ == "__main__":
    main()
