"""httpx-backed transport with cooperative cancellation."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import httpx

from media_reach.config import DEFAULT_ACCEPT_HEADER
from media_reach.models import TransportResponse

logger = logging.getLogger(__name__)


@dataclass
class HttpxTransport:
    """Adapter for TransportPort.

    The ``httpx.AsyncClient`` (and its connection pool) may be shared; the
    transport itself holds per-request cancellation state, so create one per
    candidate.
    """

    http: httpx.AsyncClient
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": DEFAULT_ACCEPT_HEADER}
    )
    _request: asyncio.Task[httpx.Response] | None = field(default=None, init=False, repr=False)
    _cancel_requested: bool = field(default=False, init=False, repr=False)

    async def get(
        self,
        url: str,
        *,
        timeout: float,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        self._cancel_requested = False
        merged = {**self.default_headers, **(headers or {})}
        self._request = asyncio.ensure_future(
            self.http.get(url, headers=merged, timeout=timeout)
        )
        try:
            response = await self._request
        except asyncio.CancelledError:
            # Only our own cancel() becomes a result; the caller's cancellation propagates.
            if not self._cancel_requested:
                raise
            logger.debug("GET %s cancelled", url)
            return TransportResponse(ok=False, cancelled=True, error="cancelled")
        except httpx.TimeoutException:
            logger.debug("GET %s timed out after %.1fs", url, timeout)
            return TransportResponse(ok=False, error=f"Timeout after {timeout}s")
        except httpx.HTTPError as exc:
            logger.debug("GET %s failed: %s", url, exc)
            return TransportResponse(ok=False, error=f"{type(exc).__name__}: {exc}")
        except Exception as exc:
            # e.g. InvalidURL, or OverflowError for an out-of-range port
            logger.debug("GET %s raised %s", url, type(exc).__name__, exc_info=True)
            return TransportResponse(ok=False, error=f"{type(exc).__name__}: {exc}")
        finally:
            self._request = None

        if response.is_success:
            return TransportResponse(ok=True, body=response.text, status_code=response.status_code)
        return TransportResponse(
            ok=False,
            body=response.text,
            status_code=response.status_code,
            error=f"HTTP {response.status_code}",
        )

    def cancel(self) -> None:
        if self._request is not None and not self._request.done():
            self._cancel_requested = True
            self._request.cancel()
