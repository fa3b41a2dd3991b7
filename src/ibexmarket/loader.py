"""TOML descriptor loader for market registries.

A descriptor is a table of tables, one section per constituent::

    [SAN]
    full_name = "Banco Santander S.A."
    short_name = "SANTANDER"
    ticker = "SAN"
    isin = "ES0113900J37"
    extra_id = "A39000013"

``full_name``, ``ticker`` and ``isin`` are required. ``short_name`` and
``extra_id`` are optional; without ``short_name`` the full name doubles as
the short name. Loading is all-or-nothing: the first bad section aborts
the load with a :class:`DescriptorError` and no Market is built.
"""

from __future__ import annotations

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from ibexmarket.config import IBEX35, DuplicateTickerPolicy, LoaderConfig, MarketSettings
from ibexmarket.errors import DescriptorError, DescriptorErrorCode
from ibexmarket.models.company import Company
from ibexmarket.models.market import Market

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("full_name", "ticker", "isin")
EXTRA_ID_KEY = "extra_id"

BUNDLED_DESCRIPTOR = resources.files("ibexmarket") / "data" / "ibex35.toml"


def load_market(
    path: Path | str,
    settings: MarketSettings = IBEX35,
    config: Optional[LoaderConfig] = None,
) -> Market:
    """Load a Market from a TOML descriptor file.

    The file is decoded as UTF-8; a leading byte-order mark is skipped.

    Raises:
        DescriptorError: ``SOURCE_UNREADABLE`` if the file cannot be opened
            or is not valid UTF-8, otherwise any of the codes raised by
            :func:`loads_market`.
    """
    source = str(path)
    try:
        with open(path, encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorError(
            f"Cannot read descriptor {source}: {exc}",
            code=DescriptorErrorCode.SOURCE_UNREADABLE,
            source=source,
        ) from exc

    return loads_market(text, settings=settings, config=config, source=source)


def loads_market(
    text: str,
    settings: MarketSettings = IBEX35,
    config: Optional[LoaderConfig] = None,
    source: str = "<string>",
) -> Market:
    """Build a Market from descriptor text.

    Raises:
        DescriptorError: ``MALFORMED_SOURCE`` for invalid TOML or a
            top-level entry that is not a table, ``MISSING_FIELD`` for an
            absent or non-string required key, ``INVALID_FIELD`` for a
            non-string optional key, ``DUPLICATE_TICKER`` when two
            sections share a ticker under ``DuplicateTickerPolicy.ERROR``.
    """
    config = config or LoaderConfig()

    try:
        table = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DescriptorError(
            f"Descriptor {source} is not valid TOML: {exc}",
            code=DescriptorErrorCode.MALFORMED_SOURCE,
            source=source,
        ) from exc

    companies: dict[str, Company] = {}
    for section, entry in table.items():
        if not isinstance(entry, dict):
            raise DescriptorError(
                f"Descriptor {source}: entry '{section}' is not a table",
                code=DescriptorErrorCode.MALFORMED_SOURCE,
                source=source,
                section=section,
            )

        company = _company_from_section(section, entry, config, source)
        logger.debug("Parsed section %s -> %s", section, company.ticker)
        if company.ticker != section:
            logger.debug(
                "Section %s declares ticker %s; the ticker is used as key",
                section,
                company.ticker,
            )

        if company.ticker in companies:
            _resolve_duplicate(companies, company, section, config, source)
        else:
            companies[company.ticker] = company

    logger.info("Loaded %d companies from %s", len(companies), source)
    return Market(companies, settings=settings)


def load_ibex35(config: Optional[LoaderConfig] = None) -> Market:
    """Load the IBEX 35 descriptor bundled with the package.

    Read through ``importlib.resources``, so it also works when the package
    is imported from a zip archive.
    """
    text = BUNDLED_DESCRIPTOR.read_text(encoding="utf-8")
    return loads_market(
        text, settings=IBEX35, config=config, source=f"ibexmarket:{BUNDLED_DESCRIPTOR.name}"
    )


# ------------------------------------------------------------------ helpers


def _company_from_section(
    section: str,
    entry: dict[str, Any],
    config: LoaderConfig,
    source: str,
) -> Company:
    full_name, ticker, isin = (
        _required_str(entry, key, section, source) for key in REQUIRED_KEYS
    )
    short_name = _optional_str(entry, config.short_name_key, section, source)
    extra_id = _optional_str(entry, EXTRA_ID_KEY, section, source)

    return Company(
        ticker=ticker,
        short_name=short_name if short_name is not None else full_name,
        isin=isin,
        full_name=full_name,
        extra_id=extra_id,
    )


def _required_str(entry: dict[str, Any], key: str, section: str, source: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        reason = "missing" if value is None else "not a string"
        raise DescriptorError(
            f"Descriptor {source}: section '{section}' key '{key}' is {reason}",
            code=DescriptorErrorCode.MISSING_FIELD,
            source=source,
            section=section,
            key=key,
        )
    return value


def _optional_str(
    entry: dict[str, Any], key: str, section: str, source: str
) -> str | None:
    if key not in entry:
        return None
    value = entry[key]
    if not isinstance(value, str):
        raise DescriptorError(
            f"Descriptor {source}: section '{section}' key '{key}' is not a string",
            code=DescriptorErrorCode.INVALID_FIELD,
            source=source,
            section=section,
            key=key,
        )
    return value


def _resolve_duplicate(
    companies: dict[str, Company],
    company: Company,
    section: str,
    config: LoaderConfig,
    source: str,
) -> None:
    if config.on_duplicate is DuplicateTickerPolicy.ERROR:
        raise DescriptorError(
            f"Descriptor {source}: section '{section}' repeats ticker {company.ticker}",
            code=DescriptorErrorCode.DUPLICATE_TICKER,
            source=source,
            section=section,
            key="ticker",
        )
    if config.on_duplicate is DuplicateTickerPolicy.LAST_WINS:
        logger.warning(
            "Section %s replaces earlier entry for ticker %s", section, company.ticker
        )
        companies[company.ticker] = company
    else:
        logger.warning(
            "Section %s ignored, ticker %s already loaded", section, company.ticker
        )
