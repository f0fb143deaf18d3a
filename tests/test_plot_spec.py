import numpy as np
import pandas as pd
import pytest

from trajanim.data import select_storm
from trajanim.visualization import ColorScale, PlotSpec, SizeScale, TrajectoryPlotter


def test_builder_chain_collects_layers(walk, borders):
    spec = (
        PlotSpec(walk)
        .add_borders(borders)
        .add_path(color="black")
        .add_points(color_by="time")
        .add_point_labels()
        .set_labels(title="Walk")
    )
    assert [type(layer).__name__ for layer in spec.layers] == [
        "BordersLayer", "PathLayer", "PointLayer", "TextLayer",
    ]
    assert spec.title == "Walk"
    assert spec.xlabel == "x"


def test_layers_are_optional(walk):
    spec = PlotSpec(walk).add_path()
    assert [type(layer).__name__ for layer in spec.layers] == ["PathLayer"]


def test_empty_data_is_rejected():
    with pytest.raises(ValueError):
        PlotSpec(pd.DataFrame({"time": [], "x": [], "y": []}))


def test_missing_columns_are_rejected(walk):
    with pytest.raises(KeyError):
        PlotSpec(walk, x="long")
    with pytest.raises(KeyError):
        PlotSpec(walk).add_points(color_by="wind")


def test_positions_follow_row_order(walk):
    spec = PlotSpec(walk)
    np.testing.assert_array_equal(spec.positions(), walk[["x", "y"]].to_numpy())


def test_datetime_times_become_seconds(storms):
    track = select_storm(storms, "Katrina", 2005)
    spec = PlotSpec(track, x="long", y="lat", time="date")
    times = spec.times()
    assert times[1] - times[0] == 6 * 3600


def test_color_scale_spans_palette():
    data = pd.DataFrame({"v": [0.0, 5.0, 10.0]})
    rgba = ColorScale("v", palette="viridis").map(data)
    assert rgba.shape == (3, 4)
    cmap = ColorScale("v", palette="viridis").cmap()
    np.testing.assert_allclose(rgba[0], cmap(0.0))
    np.testing.assert_allclose(rgba[-1], cmap(1.0))


def test_constant_column_maps_to_midpoint():
    data = pd.DataFrame({"v": [3.0, 3.0]})
    sizes = SizeScale("v", range=(10.0, 30.0)).map(data)
    assert sizes.tolist() == [20.0, 20.0]


def test_size_scale_is_linear():
    data = pd.DataFrame({"v": [0.0, 50.0, 100.0]})
    sizes = SizeScale("v", range=(20.0, 220.0)).map(data)
    np.testing.assert_allclose(sizes, [20.0, 120.0, 220.0])


def test_uniform_point_color(walk):
    spec = PlotSpec(walk).add_points(color="red")
    colors = spec.points.colors(walk)
    assert colors.shape == (len(walk), 4)
    np.testing.assert_allclose(colors[0], [1.0, 0.0, 0.0, 1.0])


def test_explicit_limits_win_over_data(walk, borders):
    spec = PlotSpec(walk).add_borders(borders, xlim=(-1, 1), ylim=(-2, 2))
    assert spec.data_limits() == ((-1, 1), (-2, 2))


def test_data_limits_are_padded(walk):
    (xmin, xmax), (ymin, ymax) = PlotSpec(walk).data_limits(pad=0.1)
    assert xmin < walk["x"].min() and xmax > walk["x"].max()
    assert ymin < walk["y"].min() and ymax > walk["y"].max()


def test_static_plot_is_saved(tmp_path, walk):
    spec = PlotSpec(walk).add_path().add_points(color_by="time").add_point_labels()
    path = tmp_path / "walk.png"
    fig = TrajectoryPlotter(figsize=(4, 3)).plot_trajectory(spec, save_path=str(path))
    assert path.exists() and path.stat().st_size > 0
    assert len(fig.axes) == 2  # plot and colour bar
