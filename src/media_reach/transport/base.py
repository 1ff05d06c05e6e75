"""Port: HTTP transport used by reachability probes."""

from __future__ import annotations

from typing import Protocol

from media_reach.models import TransportResponse


class TransportPort(Protocol):
    """Port for issuing a single cancellable GET.

    One instance serves one candidate at a time; instances are never shared
    across concurrent probes.
    """

    async def get(
        self,
        url: str,
        *,
        timeout: float,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        """Fetch ``url``. Failures are reported in the response, never raised."""
        ...

    def cancel(self) -> None:
        """Abort the in-flight request; it completes with ``cancelled=True``."""
        ...
