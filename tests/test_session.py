"""
Session Tests - Unit Tests for CurrencySession

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconvert.application.session (CurrencySession)
- unittest.mock (Mock notifier, AsyncMock fetcher)
"""
import pytest

from unittest.mock import AsyncMock, Mock

from fxconvert.adapters.ui.notifier import UiNotifier
from fxconvert.application.session import CurrencySession
from fxconvert.domain.errors import NetworkFailure, ResponseFailure
from fxconvert.domain.models import CurrencyCatalog, Failure, Success


def make_session(*results, default_currency="USD"):
    fetcher = Mock()
    fetcher.fetch_catalog = AsyncMock(side_effect=list(results))
    notifier = Mock(spec=UiNotifier)
    return CurrencySession(fetcher, notifier, default_currency=default_currency), notifier


class TestLoadCatalog:
    @pytest.mark.asyncio
    async def test_load_selects_default_currency(self):
        catalog = CurrencyCatalog(("EUR", "USD", "GBP"))
        session, notifier = make_session(Success(catalog))

        assert await session.load_catalog() is True

        assert session.catalog == catalog
        assert session.source_currency == "USD"
        assert session.target_currency == "USD"
        notifier.show_catalog.assert_called_once_with(catalog, "USD")

    @pytest.mark.asyncio
    async def test_load_without_default_selects_first(self):
        catalog = CurrencyCatalog(("EUR", "GBP"))
        session, notifier = make_session(Success(catalog))

        await session.load_catalog()

        notifier.show_catalog.assert_called_once_with(catalog, "EUR")

    @pytest.mark.asyncio
    async def test_load_empty_catalog(self):
        session, notifier = make_session(Success(CurrencyCatalog()))

        await session.load_catalog()

        assert session.source_currency is None
        notifier.show_catalog.assert_called_once_with(CurrencyCatalog(), None)

    @pytest.mark.asyncio
    async def test_load_failure_notifies(self):
        session, notifier = make_session(Failure(NetworkFailure("Connection refused")))

        assert await session.load_catalog() is False

        notifier.show_failure.assert_called_once_with("Failed to fetch currencies: Connection refused")
        notifier.show_catalog.assert_not_called()
        assert len(session.catalog) == 0

    @pytest.mark.asyncio
    async def test_refresh_replaces_catalog(self):
        first = CurrencyCatalog(("USD", "EUR"))
        second = CurrencyCatalog(("USD", "JPY"))
        session, _ = make_session(Success(first), Success(second))

        await session.load_catalog()
        await session.refresh_catalog()

        assert session.catalog == second
        assert first.codes == ("USD", "EUR")

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_catalog(self):
        first = CurrencyCatalog(("USD", "EUR"))
        session, notifier = make_session(Success(first), Failure(ResponseFailure("Unexpected code 503", 503)))

        await session.load_catalog()
        session.select(target="EUR")
        await session.refresh_catalog()

        assert session.catalog == first
        assert session.target_currency == "EUR"
        notifier.show_failure.assert_called_once_with("Failed to fetch currencies: Unexpected code 503")


class TestSelect:
    @pytest.mark.asyncio
    async def test_select_known_codes(self):
        session, _ = make_session(Success(CurrencyCatalog(("USD", "EUR"))))
        await session.load_catalog()

        assert session.select("EUR", "USD") is True
        assert (session.source_currency, session.target_currency) == ("EUR", "USD")

    @pytest.mark.asyncio
    async def test_select_unknown_code_changes_nothing(self):
        session, _ = make_session(Success(CurrencyCatalog(("USD", "EUR"))))
        await session.load_catalog()

        assert session.select("EUR", "XYZ") is False
        assert (session.source_currency, session.target_currency) == ("USD", "USD")
