# src/fxconvert/adapters/providers/base.py
"""
Base Provider Interfaces for the Rate Service

This module defines the abstract base classes for catalog and rate fetchers.
Both return a FetchResult instead of raising, so callers handle success and
failure through one type.

Files that USE this module:
- fxconvert.adapters.providers.currencyfreaks (implements both interfaces)
- fxconvert.application.conversion (depends on RateFetcher)
- fxconvert.application.session (depends on CatalogFetcher)

Files that this module USES:
- fxconvert.domain.models (CurrencyCatalog, FetchResult)
"""
from abc import ABC, abstractmethod

from fxconvert.domain.models import CurrencyCatalog, CurrencyCode, FetchResult


class CatalogFetcher(ABC):
    @abstractmethod
    async def fetch_catalog(self) -> FetchResult[CurrencyCatalog]:
        """Return the supported currency codes in provider order."""
        raise NotImplementedError


class RateFetcher(ABC):
    @abstractmethod
    async def fetch_rate(self, source: CurrencyCode, target: CurrencyCode) -> FetchResult[float]:
        """Return how many units of target one unit of source buys."""
        raise NotImplementedError
