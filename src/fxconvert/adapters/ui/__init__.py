"""
UI Adapter - Presentation Boundary

This package contains the notifier interface and a console implementation.
"""

from fxconvert.adapters.ui.notifier import ConsoleNotifier, UiNotifier

__all__ = [
    "ConsoleNotifier",
    "UiNotifier",
]
