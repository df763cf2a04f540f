"""
Provider Adapters - Rate Service Clients

This package contains the fetchers for the CurrencyFreaks API.
Fetchers implement the CatalogFetcher and RateFetcher interfaces.
"""

from fxconvert.adapters.providers.base import CatalogFetcher, RateFetcher
from fxconvert.adapters.providers.currencyfreaks import (
    CurrencyCatalogFetcher,
    ExchangeRateFetcher,
)

__all__ = [
    "CatalogFetcher",
    "RateFetcher",
    "CurrencyCatalogFetcher",
    "ExchangeRateFetcher",
]
