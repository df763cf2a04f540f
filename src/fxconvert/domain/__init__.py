"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxconvert.domain.models import (
    PLACEHOLDER_TEXT,
    ConversionRequest,
    ConversionResult,
    CurrencyCatalog,
    CurrencyCode,
    Failure,
    FetchResult,
    Success,
    format_amount,
    round_amount,
)
from fxconvert.domain.errors import (
    DomainError,
    EmptyBodyFailure,
    FetchError,
    InvalidInput,
    NetworkFailure,
    ParseFailure,
    ResponseFailure,
)

__all__ = [
    "PLACEHOLDER_TEXT",
    "ConversionRequest",
    "ConversionResult",
    "CurrencyCatalog",
    "CurrencyCode",
    "Failure",
    "FetchResult",
    "Success",
    "format_amount",
    "round_amount",
    "DomainError",
    "EmptyBodyFailure",
    "FetchError",
    "InvalidInput",
    "NetworkFailure",
    "ParseFailure",
    "ResponseFailure",
]
