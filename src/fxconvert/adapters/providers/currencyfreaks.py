# src/fxconvert/adapters/providers/currencyfreaks.py
"""
CurrencyFreaks API Fetchers for Currency Catalog and Exchange Rates

This module implements the two calls the converter makes to the
CurrencyFreaks v2.0 API:
- GET /supported-currencies  -> {"supportedCurrenciesMap": {"USD": {...}, ...}}
- GET /rates/latest?apikey=..&symbols=<target>&base=<source> -> {"rates": {"EUR": "0.92"}}

Both fetchers catch every failure at this boundary and return a Failure
result; nothing is retried and nothing is cached.

Files that USE this module:
- fxconvert.app (wires both fetchers into the session and coordinator)
- tests.test_providers (unit tests)

Files that this module USES:
- fxconvert.adapters.http.transport (HttpTransport for async GET)
- fxconvert.adapters.providers.base (CatalogFetcher and RateFetcher interfaces)
- fxconvert.config (settings for API key and endpoint URLs)
- fxconvert.domain (models and error taxonomy)
"""
import json
import logging
import math
from typing import Any, Optional

from fxconvert.adapters.http.transport import HttpResponse, HttpTransport
from fxconvert.adapters.providers.base import CatalogFetcher, RateFetcher
from fxconvert.config import settings
from fxconvert.domain.errors import (
    EmptyBodyFailure,
    FetchError,
    NetworkFailure,
    ParseFailure,
    ResponseFailure,
)
from fxconvert.domain.models import CurrencyCatalog, CurrencyCode, Failure, FetchResult, Success
from fxconvert.shared.validators import validate_currency_code

log = logging.getLogger(__name__)


def _decode_object(body: str) -> dict:
    """
    Decode a JSON object body.

    Raises:
        ValueError: If the body is not JSON or not a JSON object
    """
    try:
        data = json.loads(body)
    except RecursionError as e:
        raise ValueError("JSON nested too deeply") from e
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _to_rate(value: Any) -> float:
    """
    Convert a provider rate (JSON number or numeric string) to float.

    Raises:
        ValueError: If the value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"rate is not numeric: {value!r}")
    try:
        rate = float(value)
    except OverflowError as e:
        raise ValueError(f"rate out of range: {str(value)[:20]}...") from e
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(f"rate must be positive and finite: {value!r}")
    return rate


class CurrencyCatalogFetcher(CatalogFetcher):
    """Fetches the list of currency codes the provider supports."""

    def __init__(self, transport: HttpTransport, url: Optional[str] = None):
        self.transport = transport
        self.url = url or settings.supported_currencies_url

    async def fetch_catalog(self) -> FetchResult[CurrencyCatalog]:
        """
        Fetch the supported currencies.

        Returns:
            Success(CurrencyCatalog) in provider order, or Failure carrying a
            NetworkFailure or ResponseFailure
        """
        try:
            log.info("Fetching supported currencies from %s", self.url)
            resp = await self.transport.get(self.url)
            catalog = self._parse(resp)
        except FetchError as e:
            log.warning("Currency catalog fetch failed: %s", e)
            return Failure(e)

        log.info("Loaded %d supported currencies", len(catalog))
        return Success(catalog)

    def _parse(self, resp: HttpResponse) -> CurrencyCatalog:
        if not resp.ok:
            raise ResponseFailure(f"Unexpected code {resp.status_code}", resp.status_code)
        if not resp.body:
            raise ResponseFailure("Response body is null", resp.status_code)

        try:
            data = _decode_object(resp.body)
        except ValueError as e:
            raise ResponseFailure(f"Error parsing JSON: {e}", resp.status_code) from e

        currencies = data.get("supportedCurrenciesMap")
        if not isinstance(currencies, dict):
            log.error("Supported currencies response missing 'supportedCurrenciesMap': %s", str(data)[:200])
            raise ResponseFailure(
                "Error parsing JSON: No value for supportedCurrenciesMap", resp.status_code
            )

        codes = []
        for code in currencies:
            if validate_currency_code(code):
                codes.append(code)
            else:
                log.warning("Skipping malformed currency code from provider: %r", code)
        return CurrencyCatalog.from_codes(codes)


class ExchangeRateFetcher(RateFetcher):
    """Fetches the latest rate for one currency pair. Every call hits the network."""

    def __init__(self, transport: HttpTransport, api_key: Optional[str] = None, url: Optional[str] = None):
        """
        Initialize the rate fetcher.

        Args:
            transport: Shared HTTP transport
            api_key: Optional API key (defaults to settings.api_key)
            url: Optional latest-rates URL (defaults to settings.latest_rates_url)

        Raises:
            ValueError: If no API key is configured
        """
        self.transport = transport
        self.api_key = api_key or settings.api_key
        if not self.api_key:
            raise ValueError("CurrencyFreaks API key not configured (set CURRENCYFREAKS_API_KEY)")
        self.url = url or settings.latest_rates_url

    async def fetch_rate(self, source: CurrencyCode, target: CurrencyCode) -> FetchResult[float]:
        """
        Fetch how many units of target one unit of source buys.

        Returns:
            Success(rate), or Failure carrying NetworkFailure, ResponseFailure,
            EmptyBodyFailure or ParseFailure
        """
        params = {"apikey": self.api_key, "symbols": target, "base": source}
        try:
            log.debug("Fetching %s->%s rate", source, target)
            resp = await self.transport.get(self.url, params=params)
        except NetworkFailure as e:
            return Failure(NetworkFailure(f"Failed to fetch exchange rate: {e}"))

        try:
            rate = self._parse(resp, target)
        except FetchError as e:
            log.warning("Rate fetch %s->%s failed: %s", source, target, e)
            return Failure(e)

        log.info("Rate %s->%s = %s", source, target, rate)
        return Success(rate)

    @staticmethod
    def _parse(resp: HttpResponse, target: CurrencyCode) -> float:
        if not resp.ok:
            raise ResponseFailure(f"Unexpected code {resp.status_code}", resp.status_code)
        if not resp.body:
            raise EmptyBodyFailure("Empty response body")

        try:
            data = _decode_object(resp.body)
            rates = data.get("rates")
            if not isinstance(rates, dict):
                raise ValueError("No value for rates")
            if target not in rates:
                raise ValueError(f"No value for {target}")
            return _to_rate(rates[target])
        except ValueError as e:
            raise ParseFailure(f"Error parsing JSON: {e}") from e
