"""Unit tests for the oxygen model report script helpers."""

import importlib.util
from pathlib import Path

import pytest

from ecostats.diagnostics import CandidateModel
from ecostats.exceptions import MissingColumnError

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "oxygen_models.py"


@pytest.fixture(scope="module")
def oxygen_script():
    spec = importlib.util.spec_from_file_location("oxygen_models", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestLoadSamples:

    def test_keeps_complete_model_rows(self, oxygen_script, oxygen_df, candidates, tmp_path) -> None:
        df = oxygen_df.assign(station=range(len(oxygen_df)))
        df.loc[3, "nitrate"] = None
        path = tmp_path / "samples.csv"
        df.to_csv(path, index=False)

        out = oxygen_script.load_samples(path, candidates)

        assert len(out) == len(oxygen_df) - 1
        assert "station" not in out.columns

    def test_missing_response(self, oxygen_script, oxygen_df, candidates, tmp_path) -> None:
        path = tmp_path / "samples.csv"
        oxygen_df.drop(columns=["o2_sat"]).to_csv(path, index=False)
        with pytest.raises(MissingColumnError, match="o2_sat"):
            oxygen_script.load_samples(path, candidates)

    def test_partly_available_candidate_is_kept(self, oxygen_script, oxygen_df, candidates, tmp_path) -> None:
        path = tmp_path / "samples.csv"
        oxygen_df.drop(columns=["nitrate"]).to_csv(path, index=False)

        out = oxygen_script.load_samples(path, candidates)

        assert len(out) == len(oxygen_df)
        assert "nitrate" not in out.columns

    def test_no_fully_available_candidate(self, oxygen_script, oxygen_df, tmp_path) -> None:
        path = tmp_path / "samples.csv"
        oxygen_df.to_csv(path, index=False)
        chlorophyll = CandidateModel("chlorophyll", "o2_sat", ("chlorophyll",))
        with pytest.raises(MissingColumnError, match="chlorophyll"):
            oxygen_script.load_samples(path, [chlorophyll])
