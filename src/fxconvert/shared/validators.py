# src/fxconvert/shared/validators.py
"""
Input Validation Utilities - Configuration and User Input Validation

This module provides validation functions for configuration values and for
the raw text a user types into the amount field.

Files that USE this module:
- fxconvert.config.settings (uses validation functions in Settings field validators)
- fxconvert.domain.models (currency code and amount checks for requests and catalogs)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Optional

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z0-9]{2,12}")


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not api_key.isspace() and " " not in api_key


def validate_base_url(url: str) -> bool:
    """Return True if url looks like an absolute http(s) URL."""
    if not url:
        return False
    return bool(re.fullmatch(r"https?://[^\s/]+(/\S*)?", url))


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    Provider codes are short uppercase identifiers. Besides ISO 4217 codes
    the provider also lists crypto and commodity symbols (e.g. "USDT", "XAU",
    "1INCH"), so digits are allowed.

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code or not isinstance(code, str):
        return False
    return bool(CURRENCY_CODE_PATTERN.fullmatch(code))


def parse_amount(value: Optional[str]) -> Optional[float]:
    """
    Parse the amount typed by the user.

    Accepts plain decimal notation and exponent notation ("1e3").
    Surrounding whitespace is ignored.

    Args:
        value: Raw text from the amount field

    Returns:
        The amount as float, or None if the text is empty, not a number,
        not finite, or not strictly positive
    """
    if value is None:
        return None

    text = value.strip()
    if not text:
        return None

    try:
        amount = float(text)
    except ValueError:
        return None

    # float() also accepts "nan" and "inf"
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
