"""Domain models for media-reach.

Value types are frozen dataclasses. ConnectionCandidate is the one mutable
entity: a probe overwrites its ``state`` as its final step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

# ─── Enumerations ─────────────────────────────────────────────


class ConnectionState(StrEnum):
    UNKNOWN = "unknown"
    REACHABLE = "reachable"
    UNAUTHORIZED = "unauthorized"
    UNREACHABLE = "unreachable"


class ConnectionOrigin(StrEnum):
    DISCOVERED = "discovered"
    MANUAL = "manual"
    REMOTE_DIRECTORY = "remote_directory"


# ─── Endpoint ─────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Network address of a server plus an optional target resource."""

    scheme: str
    host: str
    port: int
    path: str = ""  # no leading "/"
    query: tuple[tuple[str, str], ...] = ()

    @property
    def is_secure(self) -> bool:
        return self.scheme.lower() == "https"

    @property
    def is_complete(self) -> bool:
        return bool(self.scheme and self.host and self.port)

    def with_path(self, path: str) -> Endpoint:
        return replace(self, path=path)

    def with_query_param(self, key: str, value: str) -> Endpoint:
        """Return a copy with ``key`` set to ``value``, replacing any previous value."""
        kept = tuple((k, v) for k, v in self.query if k != key)
        return replace(self, query=(*kept, (key, value)))

    def query_value(self, key: str) -> str | None:
        return next((v for k, v in self.query if k == key), None)

    def render(self) -> str:
        url = f"{self.scheme}://{self.host}:{self.port}/{self.path}"
        if self.query:
            url = f"{url}?{urlencode(self.query)}"
        return url

    def __str__(self) -> str:
        return self.render()


# ─── Candidate ────────────────────────────────────────────────


@dataclass(slots=True)
class ConnectionCandidate:
    """One concrete route believed to reach a logical media server."""

    endpoint: Endpoint
    origins: frozenset[ConnectionOrigin]
    token: str = ""
    state: ConnectionState = ConnectionState.UNKNOWN
    refreshed: bool = True

    @classmethod
    def create(
        cls,
        origin: ConnectionOrigin | Iterable[ConnectionOrigin],
        host: str,
        port: int,
        scheme: str,
        token: str = "",
        *,
        log: logging.Logger | None = None,
    ) -> ConnectionCandidate:
        """Build a candidate as handed over by a discovery source.

        Missing host, port or scheme is logged but tolerated; such a
        candidate simply fails its first probe.
        """
        origins = (
            frozenset({origin})
            if isinstance(origin, ConnectionOrigin)
            else frozenset(origin)
        )
        endpoint = Endpoint(scheme=scheme or "", host=host or "", port=port or 0)
        if not endpoint.is_complete:
            (log or logger).warning(
                "Connection candidate created with an empty field "
                "(scheme=%r, host=%r, port=%r)",
                scheme,
                host,
                port,
            )
        return cls(endpoint=endpoint, origins=origins, token=token or "")

    @property
    def is_valid(self) -> bool:
        return self.endpoint.is_complete

    @property
    def is_secure(self) -> bool:
        return self.endpoint.is_secure


# ─── Transport Models ─────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Outcome of one GET issued by a transport."""

    ok: bool
    body: str = ""
    status_code: int = 0  # 0 when no HTTP response was received
    cancelled: bool = False
    error: str = ""

