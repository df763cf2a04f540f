# src/fxconvert/adapters/ui/notifier.py
"""
UI Notifier - Presentation Boundary

This module defines what the application layer may tell the user interface:
populate the currency choices, show a converted amount, clear the output,
or show a failure message. Every call is made from the event loop thread.

Files that USE this module:
- fxconvert.application.conversion (sends amounts, clears and failures)
- fxconvert.application.session (sends the currency catalog)
- fxconvert.app (uses ConsoleNotifier)

Files that this module USES:
- fxconvert.domain.models (CurrencyCatalog, PLACEHOLDER_TEXT)
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from fxconvert.domain.models import PLACEHOLDER_TEXT, CurrencyCatalog, CurrencyCode

log = logging.getLogger(__name__)


class UiNotifier(ABC):
    @abstractmethod
    def show_catalog(self, catalog: CurrencyCatalog, selected: Optional[CurrencyCode]) -> None:
        """Populate the source and target choices and pre-select a code."""

    @abstractmethod
    def show_amount(self, text: str) -> None:
        """Display a formatted converted amount."""

    @abstractmethod
    def clear_amount(self) -> None:
        """Reset the output field to its placeholder."""

    @abstractmethod
    def show_failure(self, message: str) -> None:
        """Show a short failure notification; the output field is left as is."""


class ConsoleNotifier(UiNotifier):
    """Writes UI updates as plain lines, e.g. to stdout."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write
        self.output_text = PLACEHOLDER_TEXT

    def show_catalog(self, catalog: CurrencyCatalog, selected: Optional[CurrencyCode]) -> None:
        log.debug("Showing %d currencies, selected=%s", len(catalog), selected)
        self.write(f"Currencies ({len(catalog)}): {', '.join(catalog)}")
        if selected:
            self.write(f"Selected: {selected}")

    def show_amount(self, text: str) -> None:
        self.output_text = text
        self.write(text)

    def clear_amount(self) -> None:
        self.output_text = PLACEHOLDER_TEXT
        self.write(PLACEHOLDER_TEXT)

    def show_failure(self, message: str) -> None:
        self.write(f"! {message}")
