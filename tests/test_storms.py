import pandas as pd
import pytest

from trajanim.data import (
    NoMatchingDataError,
    clip_borders,
    load_borders,
    load_storms,
    reconstruct_timestamps,
    select_storm,
)


def test_select_katrina_is_filtered_and_time_ordered(storms):
    track = select_storm(storms, "Katrina", 2005)

    assert len(track) == 4
    assert set(track["name"]) == {"Katrina"}
    assert set(track["year"]) == {2005}
    assert track["date"].is_monotonic_increasing
    assert track.index.tolist() == [0, 1, 2, 3]


def test_reconstructed_timestamp_matches_components(storms):
    track = select_storm(storms, "Katrina", 2005)
    for _, row in track.iterrows():
        expected = pd.Timestamp(
            f"{row['year']:04d}-{row['month']:02d}-{row['day']:02d} {row['hour']:02d}:00:00"
        )
        assert row["date"] == expected
    assert track["date"].iloc[0] == pd.Timestamp("2005-08-23 18:00:00")


def test_selection_does_not_modify_source(storms):
    before = storms.copy()
    select_storm(storms, "Katrina", 2005)
    pd.testing.assert_frame_equal(storms, before)


def test_extra_columns_are_kept(storms):
    track = select_storm(storms, "Rita", 2005)
    assert {"status", "wind", "pressure", "date"} <= set(track.columns)


@pytest.mark.parametrize("name, year", [("Katrina", 2010), ("Andrew", 2005), ("katrina", 2005)])
def test_absent_storm_raises_no_matching_data(storms, name, year):
    with pytest.raises(NoMatchingDataError, match=name):
        select_storm(storms, name, year)


def test_no_matching_data_is_a_lookup_error():
    assert issubclass(NoMatchingDataError, LookupError)


def test_unparseable_date_components_propagate(storms):
    bad = storms.copy()
    bad.loc[0, "month"] = 13
    with pytest.raises(ValueError):
        select_storm(bad, "Katrina", 2005)


def test_reconstruct_timestamps_requires_components():
    with pytest.raises(ValueError, match="hour"):
        reconstruct_timestamps(pd.DataFrame({"year": [2005], "month": [8], "day": [29]}))


def test_load_storms_round_trip(storms_csv):
    loaded = load_storms(storms_csv)
    assert len(loaded) == 7


def test_load_storms_rejects_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    pd.DataFrame({"name": ["Katrina"], "year": [2005]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="lat"):
        load_storms(path)


def test_load_borders_sorts_by_order(tmp_path):
    path = tmp_path / "borders.csv"
    pd.DataFrame(
        {"long": [2.0, 1.0, 3.0], "lat": [0.0, 0.0, 0.0], "group": [1, 1, 1], "order": [2, 1, 3]}
    ).to_csv(path, index=False)
    outlines = load_borders(path)
    assert outlines["long"].tolist() == [1.0, 2.0, 3.0]


def test_load_borders_rejects_missing_columns(tmp_path):
    path = tmp_path / "borders.csv"
    pd.DataFrame({"long": [1.0], "lat": [2.0]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="group"):
        load_borders(path)


def test_clip_borders_keeps_whole_outlines(borders):
    clipped = clip_borders(borders, xlim=(-79.5, -70.0), ylim=(20.0, 30.0))
    assert clipped["group"].unique().tolist() == [1]
    assert len(clipped) == 3
