"""
HTTP Adapter - Transport for the Rate Service

This package wraps the blocking requests library behind an async interface.
"""

from fxconvert.adapters.http.transport import HttpResponse, HttpTransport

__all__ = [
    "HttpResponse",
    "HttpTransport",
]
