import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest
from matplotlib import pyplot as plt

from ecostats.diagnostics import CandidateModel


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def oxygen_df() -> pd.DataFrame:
    """100 synthetic bottle samples; o2_sat depends on temperature, salinity and depth."""
    rng = np.random.default_rng(0)
    n = 100
    temperature = rng.uniform(2, 25, n)
    salinity = rng.uniform(32, 36, n)
    depth = rng.uniform(0, 500, n)
    phosphate = rng.uniform(0.1, 3.0, n)
    nitrate = rng.uniform(0.5, 40.0, n)
    noise = rng.normal(0, 2.0, n)
    o2_sat = 110 - 1.5 * temperature + 0.8 * salinity - 0.02 * depth + noise
    return pd.DataFrame(
        {
            "o2_sat": o2_sat,
            "temperature": temperature,
            "salinity": salinity,
            "depth": depth,
            "phosphate": phosphate,
            "nitrate": nitrate,
        }
    )


@pytest.fixture
def candidates():
    return [
        CandidateModel("physical", "o2_sat", ("temperature", "salinity", "depth")),
        CandidateModel("nutrients", "o2_sat", ("temperature", "salinity", "depth", "phosphate", "nitrate")),
    ]


@pytest.fixture
def survey_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Site": ["Pond A", "Pond B", "Pond A", "Creek", "Pond B", "Creek", "Marsh"],
            "Species": ["Rana", "Bufo", "Bufo", "Rana", "Rana", "Hyla", "NA"],
            "Count": [4, 10, 3, 7, 1, 2, 5],
            "Observer": ["x", "y", "x", "z", "y", "z", "x"],
        }
    )
