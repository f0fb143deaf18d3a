import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from trajanim.data import RandomWalkConfig, generate_random_walk


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def walk():
    return generate_random_walk(RandomWalkConfig(n_points=20, seed=7))


@pytest.fixture
def storms():
    """Small storms table; rows deliberately out of time order."""
    rows = [
        # name, year, month, day, hour, lat, long, status, wind, pressure
        ("Katrina", 2005, 8, 24, 0, 23.4, -75.7, "tropical depression", 30, 1007),
        ("Katrina", 2005, 8, 23, 18, 23.1, -75.1, "tropical depression", 30, 1008),
        ("Katrina", 2005, 8, 25, 12, 26.0, -78.7, "hurricane", 65, 988),
        ("Katrina", 2005, 8, 24, 12, 24.5, -76.5, "tropical storm", 40, 1003),
        ("Katrina", 1999, 10, 29, 0, 13.0, -83.0, "tropical depression", 30, 1003),
        ("Rita", 2005, 9, 18, 0, 22.2, -71.0, "tropical depression", 30, 1006),
        ("Rita", 2005, 9, 18, 6, 22.5, -72.0, "tropical storm", 35, 1004),
    ]
    return pd.DataFrame(
        rows,
        columns=["name", "year", "month", "day", "hour", "lat", "long",
                 "status", "wind", "pressure"],
    )


@pytest.fixture
def storms_csv(tmp_path, storms):
    path = tmp_path / "storms.csv"
    storms.to_csv(path, index=False)
    return path


@pytest.fixture
def borders():
    return pd.DataFrame(
        {
            "long": [-80.0, -79.0, -78.0, -120.0, -119.0],
            "lat": [25.0, 26.0, 27.0, 45.0, 46.0],
            "group": [1, 1, 1, 2, 2],
        }
    )
