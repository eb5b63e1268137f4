"""Unit tests for cleaning transformers and survey summaries."""

import numpy as np
import pandas as pd
import pytest

from ecostats.exceptions import MissingColumnError
from ecostats.transformers import DropIncompleteRows, FixNulls, SelectColumns, aggregate_counts, top_n

REPORT_COLUMNS = {"Site": "site", "Species": "species", "Count": "count"}


@pytest.fixture
def clean_survey(survey_df) -> pd.DataFrame:
    df = FixNulls().transform(survey_df)
    return SelectColumns(REPORT_COLUMNS).fit_transform(df)


class TestFixNulls:

    def test_replaces_null_tokens(self, survey_df) -> None:
        out = FixNulls().transform(survey_df)
        assert out["Species"].isna().sum() == 1
        assert survey_df["Species"].isna().sum() == 0

    def test_custom_tokens(self) -> None:
        s = pd.Series(["a", "missing", "b"])
        out = FixNulls(values=["missing"]).fit_transform(s)
        assert out.isna().tolist() == [False, True, False]

    def test_rejects_non_pandas(self) -> None:
        with pytest.raises(ValueError):
            FixNulls().transform([["NA"]])


class TestSelectColumns:

    def test_selects_and_renames(self, survey_df) -> None:
        out = SelectColumns(REPORT_COLUMNS).fit_transform(survey_df)
        assert list(out.columns) == ["site", "species", "count"]
        assert out["count"].tolist() == survey_df["Count"].tolist()

    def test_list_keeps_names_and_order(self, survey_df) -> None:
        out = SelectColumns(["Count", "Site"]).fit_transform(survey_df)
        assert list(out.columns) == ["Count", "Site"]

    def test_missing_source_column(self, survey_df) -> None:
        with pytest.raises(MissingColumnError, match="Habitat"):
            SelectColumns({"Habitat": "habitat"}).fit(survey_df)


class TestDropIncompleteRows:

    def test_drops_rows_with_missing_values(self, clean_survey) -> None:
        transformer = DropIncompleteRows()
        out = transformer.fit_transform(clean_survey)
        assert len(out) == 6
        assert transformer.n_dropped_ == 1

    def test_subset(self, clean_survey) -> None:
        transformer = DropIncompleteRows(columns=["count"])
        out = transformer.fit_transform(clean_survey)
        assert len(out) == 7
        assert transformer.n_dropped_ == 0

    def test_unknown_subset_column(self, clean_survey) -> None:
        with pytest.raises(MissingColumnError):
            DropIncompleteRows(columns=["depth"]).fit_transform(clean_survey)


class TestAggregateCounts:

    def test_sum_per_group(self, clean_survey) -> None:
        out = aggregate_counts(clean_survey, "species", "count")
        assert out["species"].tolist() == ["Bufo", "Hyla", "Rana"]
        assert out["count"].tolist() == [13, 2, 12]

    def test_mean_per_group(self, clean_survey) -> None:
        out = aggregate_counts(clean_survey, "species", "count", agg="mean").set_index("species")
        assert out.loc["Rana", "count"] == pytest.approx(4.0)

    def test_count_per_group(self, clean_survey) -> None:
        out = aggregate_counts(clean_survey, "site", "count", agg="count").set_index("site")
        assert out["count"].to_dict() == {"Creek": 2, "Marsh": 1, "Pond A": 2, "Pond B": 2}

    def test_unsupported_aggregation(self, clean_survey) -> None:
        with pytest.raises(ValueError, match="median"):
            aggregate_counts(clean_survey, "species", "count", agg="median")

    def test_missing_column(self, clean_survey) -> None:
        with pytest.raises(MissingColumnError):
            aggregate_counts(clean_survey, "genus", "count")


class TestTopN:

    @pytest.fixture
    def site_totals(self, clean_survey) -> pd.DataFrame:
        return aggregate_counts(clean_survey, "site", "count")

    def test_largest_first(self, site_totals) -> None:
        out = top_n(site_totals, "count", n=2)
        assert out["site"].tolist() == ["Pond B", "Creek"]
        assert out["count"].tolist() == [11, 9]

    def test_ascending(self, site_totals) -> None:
        out = top_n(site_totals, "count", n=1, ascending=True)
        assert out["site"].tolist() == ["Marsh"]

    def test_n_larger_than_frame(self, site_totals) -> None:
        assert len(top_n(site_totals, "count", n=50)) == len(site_totals)

    def test_ties_keep_input_order(self) -> None:
        df = pd.DataFrame({"site": ["b", "a", "c"], "count": [5, 5, 1]})
        assert top_n(df, "count", n=2)["site"].tolist() == ["b", "a"]

    def test_invalid_n(self, site_totals) -> None:
        with pytest.raises(ValueError):
            top_n(site_totals, "count", n=0)

    def test_does_not_modify_input(self, site_totals) -> None:
        before = site_totals.copy()
        top_n(site_totals, "count", n=2)
        pd.testing.assert_frame_equal(site_totals, before)
