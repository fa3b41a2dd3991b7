"""Company (index constituent) data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Company:
    """A tradable legal entity listed on a market.

    Identifiers are stored as given; no ISIN checksum or ticker format
    check is applied.

    Attributes:
        ticker: Exchange symbol, the company's key inside a Market.
        short_name: Common or contracted name (e.g. "SANTANDER").
        isin: International Securities Identification Number.
        full_name: Legal name, if known.
        extra_id: Jurisdiction-specific registry id, such as the Spanish
            NIF. None for companies registered where no such id is issued.
    """

    ticker: str
    short_name: str
    isin: str
    full_name: str | None = None
    extra_id: str | None = None

    @property
    def name(self) -> str:
        """Most common name of the company."""
        return self.short_name
