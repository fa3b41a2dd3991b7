"""Tests for DataFrame export."""

import pandas as pd

from ibexmarket.frames import COLUMNS, constituents_frame
from ibexmarket.models.market import Market


class TestConstituentsFrame:
    def test_rows_sorted(self, market):
        df = constituents_frame(market)
        assert list(df.columns) == COLUMNS
        assert list(df["ticker"]) == ["AENA", "AMS", "CLNX"]
        assert df.loc[2, "short_name"] == "CELLNEX"

    def test_missing_extra_id(self, foreign_company):
        df = constituents_frame(Market({"FER": foreign_company}))
        assert pd.isna(df.loc[0, "extra_id"])

    def test_empty(self):
        df = constituents_frame(Market({}))
        assert df.empty
        assert list(df.columns) == COLUMNS
