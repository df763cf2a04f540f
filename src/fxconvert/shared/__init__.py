"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fxconvert.shared.validators import (
    parse_amount,
    validate_api_key,
    validate_base_url,
    validate_currency_code,
)
from fxconvert.shared.logging_conf import setup_logging

__all__ = [
    "parse_amount",
    "validate_api_key",
    "validate_base_url",
    "validate_currency_code",
    "setup_logging",
]
