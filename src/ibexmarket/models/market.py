"""Market (index registry) data model."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ibexmarket.config import IBEX35, MarketSettings
from ibexmarket.models.company import Company


class Market:
    """Immutable registry of the companies that make up a market index.

    The registry holds whatever constituents the caller supplies; it does
    not check them against any official index composition. When the index
    is rebalanced, build a new Market. There is no add/remove API, so a
    Market can be shared between threads without locking.

    Keys of ``constituents`` are what ``stock_by_ticker`` looks up, so each
    key must equal its company's ``ticker``; the constructor does not
    check this. :func:`ibexmarket.loader.load_market` always keys by ticker.

    Usage::

        market = Market({"SAN": santander, "BBVA": bbva})
        market.stock_by_ticker("SAN")
        market.stock_by_name("banco")
    """

    __slots__ = ("_settings", "_companies")

    def __init__(
        self,
        constituents: Mapping[str, Company],
        settings: MarketSettings = IBEX35,
    ) -> None:
        self._settings = settings
        # Private copy: later changes to the caller's mapping are not seen.
        self._companies: Mapping[str, Company] = MappingProxyType(dict(constituents))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_companies"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    # ------------------------------------------------------------ metadata

    @property
    def settings(self) -> MarketSettings:
        return self._settings

    def market_name(self) -> str:
        """Name of the market, e.g. "BME Ibex35 Index"."""
        return self._settings.name

    @property
    def open_time(self) -> str:
        """Session open time (UTC)."""
        return self._settings.open_time

    @property
    def close_time(self) -> str:
        """Session close time (UTC)."""
        return self._settings.close_time

    @property
    def currency(self) -> str:
        return self._settings.currency

    @property
    def constituents(self) -> Mapping[str, Company]:
        """Read-only view of ticker -> Company."""
        return self._companies

    # ------------------------------------------------------------- queries

    def list_tickers(self) -> list[str]:
        """Tickers of every company in the market, in no particular order."""
        return list(self._companies.keys())

    def get_companies(self) -> list[Company]:
        """Every company in the market, in no particular order."""
        return list(self._companies.values())

    def stock_by_ticker(self, ticker: str) -> Company | None:
        """Exact, case-sensitive ticker lookup.

        Partial tickers never match. Returns None when no company has
        ``ticker`` as its key.
        """
        return self._companies.get(ticker)

    def stock_by_name(self, name: str) -> list[Company] | None:
        """Case-insensitive substring search over short names.

        An ambiguous ``name`` matches several companies: "banco" may return
        every bank in the index. This is plain containment, not a regular
        expression.

        Returns:
            Non-empty list of matching companies, or None when nothing
            matches.
        """
        needle = name.lower()
        stocks = [c for c in self._companies.values() if needle in c.name.lower()]
        return stocks or None

    # ------------------------------------------------------------ protocol

    def __len__(self) -> int:
        return len(self._companies)

    def __contains__(self, ticker: object) -> bool:
        return ticker in self._companies

    def __iter__(self) -> Iterator[Company]:
        return iter(self._companies.values())

    def __repr__(self) -> str:
        return f"Market(name={self.market_name()!r}, constituents={len(self)})"
