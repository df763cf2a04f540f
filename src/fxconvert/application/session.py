# src/fxconvert/application/session.py
"""
Currency Session - Catalog Loading and Currency Selection

This module holds the per-session state the UI reads: the currency catalog
and the selected source and target currencies. The catalog is loaded at
startup and replaced as a whole on refresh.

Files that USE this module:
- fxconvert.app (loads the catalog at startup, tracks selections)
- tests.test_session (unit tests)

Files that this module USES:
- fxconvert.adapters.providers.base (CatalogFetcher interface)
- fxconvert.adapters.ui.notifier (UiNotifier)
- fxconvert.config (settings for default currency)
- fxconvert.domain.models (CurrencyCatalog)
"""
import logging
from typing import Optional

from fxconvert.adapters.providers.base import CatalogFetcher
from fxconvert.adapters.ui.notifier import UiNotifier
from fxconvert.config import settings
from fxconvert.domain.models import CurrencyCatalog, CurrencyCode, Failure

log = logging.getLogger(__name__)


class CurrencySession:
    def __init__(
        self,
        catalog_fetcher: CatalogFetcher,
        notifier: UiNotifier,
        default_currency: Optional[CurrencyCode] = None,
    ):
        """
        Initialize an empty session.

        Args:
            catalog_fetcher: Fetcher for the supported currencies
            notifier: UI notifier receiving the catalog or the failure message
            default_currency: Code pre-selected after loading (defaults to settings.default_currency)
        """
        self.catalog_fetcher = catalog_fetcher
        self.notifier = notifier
        self.default_currency = default_currency or settings.default_currency
        self.catalog = CurrencyCatalog()
        self.source_currency: Optional[CurrencyCode] = None
        self.target_currency: Optional[CurrencyCode] = None

    async def load_catalog(self) -> bool:
        """
        Fetch the catalog and publish it to the UI.

        On success the previous catalog is replaced and both selections are
        reset to the default currency (or the first listed code). On failure
        the previous catalog and selections are kept.

        Returns:
            True if a new catalog was loaded
        """
        result = await self.catalog_fetcher.fetch_catalog()
        if isinstance(result, Failure):
            log.error("Could not load currency catalog: %s", result.message)
            self.notifier.show_failure(f"Failed to fetch currencies: {result.message}")
            return False

        self.catalog = result.value
        selected = self.catalog.default_selection(self.default_currency)
        self.source_currency = selected
        self.target_currency = selected
        log.info("Currency catalog ready (%d codes, selected=%s)", len(self.catalog), selected)
        self.notifier.show_catalog(self.catalog, selected)
        return True

    async def refresh_catalog(self) -> bool:
        """Reload the catalog; same semantics as load_catalog."""
        return await self.load_catalog()

    def select(self, source: Optional[CurrencyCode] = None, target: Optional[CurrencyCode] = None) -> bool:
        """
        Change the selected currencies. Codes must be in the catalog.

        Returns:
            True if every given code was accepted; on False nothing changes
        """
        for code in (source, target):
            if code is not None and code not in self.catalog:
                log.warning("Ignoring selection of unsupported currency %r", code)
                return False
        if source is not None:
            self.source_currency = source
        if target is not None:
            self.target_currency = target
        return True
