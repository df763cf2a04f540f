"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from fxconvert.application.conversion import ConversionCoordinator
from fxconvert.application.session import CurrencySession

__all__ = [
    "ConversionCoordinator",
    "CurrencySession",
]
