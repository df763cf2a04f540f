# src/fxconvert/adapters/http/transport.py
"""
HTTP Transport - Async Wrapper Around a Shared requests Session

This module exposes the narrow HTTP interface the fetchers need: a single
async GET returning status code and body text. The blocking requests call
runs in the event loop's default executor; the awaited result is delivered
back on the loop thread.

Files that USE this module:
- fxconvert.adapters.providers.currencyfreaks (both fetchers issue requests through it)
- fxconvert.app (creates the shared transport)
- tests.test_transport (unit tests)

Files that this module USES:
- fxconvert.config (settings for HTTP timeout)
- fxconvert.domain.errors (NetworkFailure)
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from fxconvert.config import settings
from fxconvert.domain.errors import NetworkFailure

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status code and decoded body of a completed request (body None when empty)."""
    status_code: int
    body: Optional[str]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport:
    """
    Async GET over a shared requests.Session.

    The session keeps no request state of its own, so one transport can
    serve concurrent fetches; connection pooling is left to requests.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[int] = None):
        """
        Initialize the transport.

        Args:
            session: Optional requests session (a new one is created if omitted)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.session = session or requests.Session()
        self.timeout = timeout or settings.http_timeout_seconds

    def _get_blocking(self, url: str, params: Optional[Mapping[str, str]]) -> HttpResponse:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("Request to %s timed out after %ss", url, self.timeout)
            raise NetworkFailure(f"timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Request to %s failed (network/connection error): %s", url, e)
            raise NetworkFailure(str(e) or type(e).__name__) from e

        body = resp.text if resp.content else None
        log.debug("GET %s -> %d (%d bytes)", url, resp.status_code, len(resp.content or b""))
        return HttpResponse(status_code=resp.status_code, body=body)

    async def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> HttpResponse:
        """
        Issue a GET request without blocking the event loop.

        Args:
            url: Absolute URL to fetch
            params: Optional query parameters

        Returns:
            HttpResponse for any status code the server answered with

        Raises:
            NetworkFailure: If no response was received (connection error, timeout)
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get_blocking, url, params)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
