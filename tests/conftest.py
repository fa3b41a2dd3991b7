"""Shared fixtures for ibexmarket tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from ibexmarket.models.company import Company
from ibexmarket.models.market import Market


@pytest.fixture
def spanish_company() -> Company:
    """Ibex35 member registered in Spain (has a NIF)."""
    return Company(
        ticker="SAN",
        short_name="SANTANDER",
        isin="ES0113900J37",
        full_name="Banco Santander",
        extra_id="A39000013",
    )


@pytest.fixture
def foreign_company() -> Company:
    """Ibex35 member registered abroad (no NIF)."""
    return Company(
        ticker="FER",
        short_name="FERROVIAL",
        isin="NL0015001FS8",
        full_name="Ferrovial S.E.",
    )


@pytest.fixture
def ibex_companies() -> dict[str, Company]:
    return {
        "AENA": Company(
            ticker="AENA", short_name="AENA", isin="ES0105046009",
            full_name="AENA S.A.", extra_id="A86212420",
        ),
        "AMS": Company(
            ticker="AMS", short_name="AMADEUS", isin="ES0109067019",
            full_name="Amadeus IT Holding S.A.", extra_id="A-84236934",
        ),
        "CLNX": Company(
            ticker="CLNX", short_name="CELLNEX", isin="ES0105066007",
            full_name="Cellnex Telecom S.A.", extra_id="A64907306",
        ),
    }


@pytest.fixture
def market(ibex_companies) -> Market:
    return Market(ibex_companies)


@pytest.fixture
def descriptor_text() -> str:
    """Three-section descriptor in the historical layout (no short_name key)."""
    return (
        '[AENA]\n'
        'full_name = "Aena S.M.E., S.A."\n'
        'ticker = "AENA"\n'
        'isin = "ES0105046009"\n'
        'extra_id = "A86212420"\n'
        '\n'
        '[AMS]\n'
        'full_name = "Amadeus IT Group S.A."\n'
        'ticker = "AMS"\n'
        'isin = "ES0109067019"\n'
        'extra_id = "A84236934"\n'
        '\n'
        '[CLNX]\n'
        'full_name = "Cellnex Telecom S.A."\n'
        'ticker = "CLNX"\n'
        'isin = "ES0105066007"\n'
        'extra_id = "A64907306"\n'
    )


@pytest.fixture
def descriptor_file(tmp_path, descriptor_text) -> Path:
    path = tmp_path / "ibex.toml"
    path.write_text(descriptor_text, encoding="utf-8")
    return path
