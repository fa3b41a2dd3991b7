"""Market and company models."""

from ibexmarket.models.company import Company
from ibexmarket.models.market import Market

__all__ = [
    "Company",
    "Market",
]
