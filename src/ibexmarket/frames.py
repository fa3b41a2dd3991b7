"""DataFrame export of market constituents."""

from __future__ import annotations

import pandas as pd

from ibexmarket.models.market import Market

COLUMNS = ["ticker", "short_name", "full_name", "isin", "extra_id"]


def constituents_frame(market: Market) -> pd.DataFrame:
    """One row per constituent, sorted by ticker."""
    if len(market) == 0:
        return pd.DataFrame(columns=COLUMNS)

    records = []
    for c in market.get_companies():
        records.append(
            {
                "ticker": c.ticker,
                "short_name": c.short_name,
                "full_name": c.full_name,
                "isin": c.isin,
                "extra_id": c.extra_id,
            }
        )
    return pd.DataFrame(records, columns=COLUMNS).sort_values("ticker").reset_index(drop=True)
