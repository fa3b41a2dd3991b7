"""ibexmarket: IBEX 35 constituent registry.

Immutable Company/Market models, exact and fuzzy lookups, and a TOML
descriptor loader.

Quick start::

    from ibexmarket import load_ibex35
    market = load_ibex35()
    market.stock_by_ticker("SAN")
    market.stock_by_name("banco")
"""

from __future__ import annotations

import os

from ibexmarket.config import IBEX35, DuplicateTickerPolicy, LoaderConfig, MarketSettings
from ibexmarket.errors import DescriptorError, DescriptorErrorCode
from ibexmarket.formatting import (
    describe_company,
    describe_market,
    format_company,
    format_market,
)
from ibexmarket.frames import constituents_frame
from ibexmarket.loader import (
    BUNDLED_DESCRIPTOR,
    load_ibex35,
    load_market,
    loads_market,
)
from ibexmarket.models.company import Company
from ibexmarket.models.market import Market

__version__ = "0.1.0"

__all__ = [
    # Loader
    "load_market",
    "loads_market",
    "load_ibex35",
    "load_market_from_env",
    "BUNDLED_DESCRIPTOR",
    # Config
    "MarketSettings",
    "LoaderConfig",
    "DuplicateTickerPolicy",
    "IBEX35",
    # Errors
    "DescriptorError",
    "DescriptorErrorCode",
    # Models
    "Company",
    "Market",
    # Rendering and export
    "format_company",
    "describe_company",
    "format_market",
    "describe_market",
    "constituents_frame",
]


def load_market_from_env() -> Market:
    """Zero-config factory, reads the descriptor location from env vars.

    Environment variables:
        IBEXMARKET_DESCRIPTOR: Descriptor path (default: bundled IBEX 35 file).
        IBEXMARKET_ON_DUPLICATE: Duplicate ticker policy, one of "error",
            "last_wins", "first_wins" (default: "error").
    """
    config = LoaderConfig(
        on_duplicate=DuplicateTickerPolicy(
            os.getenv("IBEXMARKET_ON_DUPLICATE", "error").strip()
        ),
    )
    path = os.getenv("IBEXMARKET_DESCRIPTOR")
    if not path:
        return load_ibex35(config)
    return load_market(path, settings=IBEX35, config=config)
