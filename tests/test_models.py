"""
Model Tests - Unit Tests for Domain Models and Validators

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconvert.domain.models (catalog, requests, results, rounding)
- fxconvert.shared.validators (validation helpers)
"""
import pytest

from fxconvert.domain.errors import InvalidInput, ParseFailure
from fxconvert.domain.models import (
    ConversionRequest,
    ConversionResult,
    CurrencyCatalog,
    Failure,
    Success,
    format_amount,
    round_amount,
)
from fxconvert.shared.validators import (
    parse_amount,
    validate_api_key,
    validate_base_url,
    validate_currency_code,
)


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(2.675, 2.68), (1.005, 1.01), (0.125, 0.13), (2.665, 2.67), (92.00000000000001, 92.0), (0.004, 0.0)],
    )
    def test_round_half_up(self, value, expected):
        assert round_amount(value) == expected

    def test_format_is_fixed_two_decimals(self):
        assert format_amount(92.0) == "92.00"
        assert format_amount(1234.5) == "1234.50"
        assert format_amount(0.004) == "0.00"
        assert format_amount(1e20) == "100000000000000000000.00"


class TestCurrencyCatalog:
    def test_from_codes_drops_duplicates(self):
        catalog = CurrencyCatalog.from_codes(["USD", "EUR", "USD", "GBP"])
        assert list(catalog) == ["USD", "EUR", "GBP"]
        assert len(catalog) == 3

    def test_from_codes_rejects_malformed(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            CurrencyCatalog.from_codes(["USD", "usd"])

    def test_lookup(self):
        catalog = CurrencyCatalog(("EUR", "USD"))
        assert "USD" in catalog
        assert "JPY" not in catalog

    def test_default_selection(self):
        assert CurrencyCatalog(("EUR", "USD")).default_selection() == "USD"
        assert CurrencyCatalog(("EUR", "GBP")).default_selection() == "EUR"
        assert CurrencyCatalog(("EUR", "GBP")).default_selection("GBP") == "GBP"
        assert CurrencyCatalog().default_selection() is None


class TestConversionRequest:
    def test_parse(self):
        assert ConversionRequest.parse("1e3", "USD", "EUR") == ConversionRequest(1000.0, "USD", "EUR")

    def test_parse_invalid_amount(self):
        with pytest.raises(InvalidInput):
            ConversionRequest.parse("ten", "USD", "EUR")

    def test_parse_missing_currency(self):
        with pytest.raises(InvalidInput, match="must be selected"):
            ConversionRequest.parse("10", "USD", None)


class TestResults:
    def test_fetch_results(self):
        assert Success(0.92).ok
        failure = Failure(ParseFailure("Error parsing JSON: No value for rates"))
        assert not failure.ok
        assert failure.message == "Error parsing JSON: No value for rates"

    def test_conversion_result_variants(self):
        success = ConversionResult.success(92.004)
        assert success.ok and not success.is_placeholder
        assert success.amount == 92.0
        assert success.error is None
        assert success.display_text == "92.00"

        failure = ConversionResult.failure("Empty response body")
        assert not failure.ok and not failure.is_placeholder
        assert failure.amount is None

        placeholder = ConversionResult.placeholder()
        assert placeholder.is_placeholder and not placeholder.ok
        assert placeholder.display_text == "Converted amount"

    def test_conversion_result_rejects_amount_with_error(self):
        with pytest.raises(ValueError, match="both an amount and an error"):
            ConversionResult(amount=1.0, error="Empty response body")


class TestValidators:
    @pytest.mark.parametrize("code", ["USD", "EUR", "USDT", "1INCH", "XAU"])
    def test_valid_currency_codes(self, code):
        assert validate_currency_code(code)

    @pytest.mark.parametrize("code", ["", "U", "usd", "US D", "TOOLONGCODE123", "USD\n", "\nUSD", None, 840])
    def test_invalid_currency_codes(self, code):
        assert not validate_currency_code(code)

    @pytest.mark.parametrize("text, expected", [("100", 100.0), (" 0.5 ", 0.5), ("1e2", 100.0)])
    def test_parse_amount(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [None, "", "  ", "abc", "-1", "0", "nan", "inf", "-inf", "1e400"])
    def test_parse_amount_rejects(self, text):
        assert parse_amount(text) is None

    def test_validate_api_key(self):
        assert validate_api_key("58d3f618b18a4cec")
        assert not validate_api_key("")
        assert not validate_api_key("short")
        assert not validate_api_key("has a space in it")

    def test_validate_base_url(self):
        assert validate_base_url("https://api.currencyfreaks.com/v2.0")
        assert validate_base_url("http://localhost:8080")
        assert not validate_base_url("ftp://example.com")
        assert not validate_base_url("")
        assert not validate_base_url("https://api.currencyfreaks.com\n")
