# src/fxconvert/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currency catalogs
- Conversion requests and results
- The success-or-failure result returned by both fetchers

Files that USE this module:
- fxconvert.application.* (coordinator and session consume and produce these)
- fxconvert.adapters.* (fetchers return FetchResult, notifiers render them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- fxconvert.domain.errors (error taxonomy carried by Failure)
- fxconvert.shared.validators (currency code and amount checks)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Context, Decimal, ROUND_HALF_UP  # Exact decimal rounding for money amounts
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union  # Type hints

from fxconvert.domain.errors import FetchError, InvalidInput
from fxconvert.shared.validators import parse_amount, validate_currency_code

T = TypeVar("T")

# Short uppercase identifier such as "USD"
CurrencyCode = str

PLACEHOLDER_TEXT = "Converted amount"

_CENT = Decimal("0.01")
# Wide enough for any finite float quantized to cents
_MONEY_CONTEXT = Context(prec=400)


def round_amount(value: float) -> float:
    """
    Round a money amount to 2 decimal places, half away from zero.

    The shortest repr of the float is rounded, so 2.675 gives 2.68 even
    though its binary value sits slightly below 2.675.
    """
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT))


def format_amount(value: float) -> str:
    """Fixed two-decimal text, independent of locale (e.g. '1234.50')."""
    return str(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT))


@dataclass(frozen=True)
class CurrencyCatalog:
    """
    Ordered, duplicate-free set of currency codes in provider order.

    A catalog is never mutated; a refresh builds a new one.
    """
    codes: Tuple[CurrencyCode, ...] = ()

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> CurrencyCatalog:
        """
        Build a catalog, keeping first occurrences only.

        Raises:
            ValueError: If a code does not look like a currency code
        """
        seen = []
        for code in codes:
            if not validate_currency_code(code):
                raise ValueError(f"Invalid currency code: {code!r}")
            if code not in seen:
                seen.append(code)
        return cls(tuple(seen))

    def __iter__(self) -> Iterator[CurrencyCode]:
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def default_selection(self, preferred: CurrencyCode = "USD") -> Optional[CurrencyCode]:
        """
        Code to pre-select in the UI.

        Returns:
            preferred if listed, else the first code, else None for an empty catalog
        """
        if preferred in self.codes:
            return preferred
        return self.codes[0] if self.codes else None


@dataclass(frozen=True)
class ConversionRequest:
    """
    One user-triggered conversion.

    Attributes:
        source_amount: Positive finite amount in source_currency
        source_currency: Currency the amount is expressed in
        target_currency: Currency to convert to
    """
    source_amount: float
    source_currency: CurrencyCode
    target_currency: CurrencyCode

    @classmethod
    def parse(cls, amount_text: Optional[str], source: Optional[str], target: Optional[str]) -> ConversionRequest:
        """
        Build a request from raw UI values.

        Raises:
            InvalidInput: If the amount is not a positive finite number or a
                currency is not selected
        """
        amount = parse_amount(amount_text)
        if amount is None:
            raise InvalidInput(f"Not a valid amount: {amount_text!r}")
        if not source or not target:
            raise InvalidInput("Source and target currencies must be selected")
        return cls(source_amount=amount, source_currency=source, target_currency=target)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful fetch carrying the parsed value."""
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed fetch carrying the error that ended it."""
    error: FetchError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


FetchResult = Union[Success[T], Failure]


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Exactly one of amount and error is set for a resolved conversion;
    neither is set for the neutral placeholder produced by invalid input.

    Attributes:
        amount: Converted amount rounded to 2 decimal places
        error: Human-readable failure reason
        request: The request this result answers (None for the placeholder)
    """
    amount: Optional[float] = None
    error: Optional[str] = None
    request: Optional[ConversionRequest] = None

    def __post_init__(self):
        if self.amount is not None and self.error is not None:
            raise ValueError("ConversionResult cannot carry both an amount and an error")

    @classmethod
    def success(cls, amount: float, request: Optional[ConversionRequest] = None) -> ConversionResult:
        return cls(amount=round_amount(amount), request=request)

    @classmethod
    def failure(cls, error: str, request: Optional[ConversionRequest] = None) -> ConversionResult:
        return cls(error=error, request=request)

    @classmethod
    def placeholder(cls) -> ConversionResult:
        return cls()

    @property
    def ok(self) -> bool:
        return self.amount is not None

    @property
    def is_placeholder(self) -> bool:
        return self.amount is None and self.error is None

    @property
    def display_text(self) -> str:
        """Text for the output field: the fixed 2-decimal amount or the placeholder."""
        if self.amount is not None:
            return format_amount(self.amount)
        return PLACEHOLDER_TEXT
