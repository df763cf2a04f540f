# src/fxconvert/app.py
"""
Application Entry Point - Wiring and Console Loop

This module serves as the composition root for fxconvert. It wires the
transport, fetchers, session and coordinator, loads the currency catalog
once, then converts each line read from stdin.

Input lines:
    100              convert 100 using the current selection
    100 USD EUR      select USD -> EUR, then convert 100
    refresh          reload the currency catalog
    quit             exit (EOF works too)

Files that USE this module:
- fxconvert console script / python -m fxconvert.app

Files that this module USES:
- fxconvert.shared.logging_conf (setup_logging for logging configuration)
- fxconvert.config (settings for configuration management)
- fxconvert.adapters.* (transport, fetchers, console notifier)
- fxconvert.application.* (session and coordinator)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import asyncio  # Event loop that plays the role of the UI thread
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from dataclasses import dataclass  # Container for wired components
from typing import Optional, TextIO, Tuple  # Type hints

from fxconvert.shared.logging_conf import setup_logging  # Configure logging with file rotation
from fxconvert.config import Settings, settings as default_settings  # Application settings
from fxconvert.adapters.http.transport import HttpTransport  # Shared async HTTP transport
from fxconvert.adapters.providers.currencyfreaks import (
    CurrencyCatalogFetcher,  # Supported currencies
    ExchangeRateFetcher,  # Pairwise rates
)
from fxconvert.adapters.ui.notifier import ConsoleNotifier, UiNotifier  # Presentation boundary
from fxconvert.application.conversion import ConversionCoordinator  # Conversion use case
from fxconvert.application.session import CurrencySession  # Catalog and selections

log = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")
REFRESH_COMMAND = "refresh"


@dataclass
class Application:
    transport: HttpTransport
    session: CurrencySession
    coordinator: ConversionCoordinator
    notifier: UiNotifier


def build_application(cfg: Optional[Settings] = None, notifier: Optional[UiNotifier] = None) -> Application:
    """
    Wire all components.

    Raises:
        ValueError: If the rate service API key is not configured
    """
    if cfg is None:
        cfg = default_settings
    if notifier is None:
        notifier = ConsoleNotifier()
    transport = HttpTransport(timeout=cfg.http_timeout_seconds)
    catalog_fetcher = CurrencyCatalogFetcher(transport, url=cfg.supported_currencies_url)
    rate_fetcher = ExchangeRateFetcher(transport, api_key=cfg.api_key, url=cfg.latest_rates_url)
    return Application(
        transport=transport,
        session=CurrencySession(catalog_fetcher, notifier, default_currency=cfg.default_currency),
        coordinator=ConversionCoordinator(rate_fetcher, notifier),
        notifier=notifier,
    )


def parse_line(line: str) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split an input line into amount text and an optional currency pair.

    A line with other than one or three words is returned whole as amount
    text, which the coordinator then treats as invalid input.
    """
    parts = line.split()
    if len(parts) == 3:
        return parts[0], parts[1].upper(), parts[2].upper()
    if len(parts) == 1:
        return parts[0], None, None
    return line.strip(), None, None


async def handle_line(app: Application, line: str) -> None:
    """Apply one input line to the session and run the conversion."""
    amount_text, source, target = parse_line(line)
    if source and target and not app.session.select(source, target):
        app.notifier.show_failure(f"Unsupported currency pair: {source} -> {target}")
        return
    await app.coordinator.convert(amount_text, app.session.source_currency, app.session.target_currency)


async def run(app: Application, stream: TextIO) -> None:
    """Load the catalog, then process lines until EOF or a quit command."""
    await app.session.load_catalog()

    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, stream.readline)
        if not line:
            break
        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command == REFRESH_COMMAND:
            await app.session.refresh_catalog()
            continue
        await handle_line(app, line)


def main() -> None:
    """Configure logging, wire the application and run the console loop."""
    setup_logging(
        level=default_settings.log_level,
        log_file=default_settings.log_file,
        log_dir=default_settings.log_dir,
        log_stdout=default_settings.log_stdout,
        max_bytes=default_settings.log_max_bytes,
        backup_count=default_settings.log_backup_count,
    )

    try:
        app = build_application()
    except ValueError as e:
        log.error("Configuration error: %s", e)
        sys.exit(1)

    log.info("Starting fxconvert against %s", default_settings.base_url)
    try:
        asyncio.run(run(app, sys.stdin))
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down")
    finally:
        app.transport.close()


if __name__ == "__main__":
    main()
