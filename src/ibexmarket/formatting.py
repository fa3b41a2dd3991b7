"""Plain-text rendering of companies and markets for diagnostics."""

from __future__ import annotations

from ibexmarket.models.company import Company
from ibexmarket.models.market import Market


def format_company(company: Company) -> str:
    """One-line display form, e.g. ``"SAN: SANTANDER"``."""
    return f"{company.ticker}: {company.name}"


def describe_company(company: Company) -> str:
    """Every field of a company; absent optional fields show as None."""
    return (
        f"{company.ticker} (name={company.name!r}, full_name={company.full_name!r}, "
        f"isin={company.isin!r}, extra_id={company.extra_id!r})"
    )


def format_market(market: Market) -> str:
    return market.market_name()


def describe_market(market: Market) -> str:
    """Multi-line dump of the market metadata and its constituents.

    Constituents are listed sorted by ticker so the output is stable.
    """
    lines = [
        f"{market.market_name()} [{market.open_time}-{market.close_time} UTC, "
        f"{market.currency}] {len(market)} constituents",
    ]
    for company in sorted(market.get_companies(), key=lambda c: c.ticker):
        lines.append(f"  {describe_company(company)}")
    return "\n".join(lines)
