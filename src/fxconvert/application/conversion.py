# src/fxconvert/application/conversion.py
"""
Conversion Coordinator - Amount Conversion Use Case

This module turns one user edit (amount text plus the selected currency
pair) into exactly one UI update: the converted amount, a failure message,
or a cleared output field when the amount is not a usable number.

Every invocation takes a new generation number. When an invocation finishes
after a newer one has started, its result is dropped, so a slow response for
an old amount can never overwrite the value shown for a newer one.

Per invocation: Validating -> (placeholder | Fetching -> resolved success
or failure), or superseded when a newer invocation started meanwhile.

Files that USE this module:
- fxconvert.app (runs a conversion per input line)
- tests.test_conversion (unit tests)

Files that this module USES:
- fxconvert.adapters.providers.base (RateFetcher interface)
- fxconvert.adapters.ui.notifier (UiNotifier)
- fxconvert.domain (requests, results, InvalidInput)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
import math  # Finite check on the converted amount
from typing import Optional  # Type hints for optional values

from fxconvert.adapters.providers.base import RateFetcher  # Rate fetcher interface
from fxconvert.adapters.ui.notifier import UiNotifier  # Presentation boundary
from fxconvert.domain.errors import InvalidInput  # Raised by request parsing
from fxconvert.domain.models import (
    ConversionRequest,  # Validated user input
    ConversionResult,  # Outcome shown to the user
    Failure,  # Failed fetch variant
)

log = logging.getLogger(__name__)


class ConversionCoordinator:
    """
    Validates input, fetches the rate, computes and publishes the converted amount.

    Must be driven from a single event loop; the generation counter is not
    protected against calls from other threads.
    """

    def __init__(self, rate_fetcher: RateFetcher, notifier: UiNotifier):
        """
        Initialize the coordinator.

        Args:
            rate_fetcher: Fetcher used for every conversion (no caching)
            notifier: UI notifier receiving one update per current invocation
        """
        self.rate_fetcher = rate_fetcher
        self.notifier = notifier
        self.current: ConversionResult = ConversionResult.placeholder()
        self._generation = 0

    @staticmethod
    def parse_request(
        amount_text: Optional[str], source: Optional[str], target: Optional[str]
    ) -> Optional[ConversionRequest]:
        """
        Synchronous guard for malformed input.

        Returns:
            ConversionRequest, or None if the amount is not a positive finite
            number or a currency is missing
        """
        try:
            return ConversionRequest.parse(amount_text, source, target)
        except InvalidInput as e:
            log.debug("Input short-circuited: %s", e)
            return None

    async def convert(
        self, amount_text: Optional[str], source: Optional[str], target: Optional[str]
    ) -> ConversionResult:
        """
        Convert raw UI values.

        Invalid input yields the neutral placeholder and clears the output
        field without any network call.

        Returns:
            The result of this invocation. It is only published to the UI
            (and stored in self.current) if no newer invocation started.
        """
        generation = self._next_generation()
        request = self.parse_request(amount_text, source, target)
        if request is None:
            return self._publish(generation, ConversionResult.placeholder())
        return await self._resolve(generation, request)

    async def convert_request(self, request: ConversionRequest) -> ConversionResult:
        """Convert an already validated request."""
        return await self._resolve(self._next_generation(), request)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def _resolve(self, generation: int, request: ConversionRequest) -> ConversionResult:
        fetched = await self.rate_fetcher.fetch_rate(request.source_currency, request.target_currency)

        if isinstance(fetched, Failure):
            result = ConversionResult.failure(fetched.message, request)
        else:
            converted = request.source_amount * fetched.value
            if math.isfinite(converted):
                result = ConversionResult.success(converted, request)
            else:
                log.warning("Converted amount overflowed: %s * %s", request.source_amount, fetched.value)
                result = ConversionResult.failure("Converted amount is out of range", request)

        return self._publish(generation, result)

    def _publish(self, generation: int, result: ConversionResult) -> ConversionResult:
        if generation != self._generation:
            log.debug("Dropping superseded conversion #%d (latest is #%d)", generation, self._generation)
            return result

        self.current = result
        if result.ok:
            self.notifier.show_amount(result.display_text)
        elif result.is_placeholder:
            self.notifier.clear_amount()
        else:
            self.notifier.show_failure(result.error)
        return result
