"""Market and loader configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DuplicateTickerPolicy(Enum):
    """What the loader does when two sections share a ticker."""

    ERROR = "error"
    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"


@dataclass(frozen=True)
class MarketSettings:
    """Fixed metadata of a market index.

    Attributes:
        name: Human-readable market/index name.
        open_time: Session open, time of day in UTC ("HH:MM:SS").
        close_time: Session close, time of day in UTC ("HH:MM:SS").
        currency: ISO 4217 code or currency name.
    """

    name: str
    open_time: str
    close_time: str
    currency: str


IBEX35 = MarketSettings(
    name="BME Ibex35 Index",
    open_time="08:00:00",
    close_time="16:30:00",
    currency="euro",
)


@dataclass
class LoaderConfig:
    """Configuration for the descriptor loader.

    Attributes:
        on_duplicate: Handling of repeated tickers across sections.
        short_name_key: Optional descriptor key holding the common name.
            Sections without it use ``full_name`` as the short name.
    """

    on_duplicate: DuplicateTickerPolicy = DuplicateTickerPolicy.ERROR
    short_name_key: str = "short_name"
