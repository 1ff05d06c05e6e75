"""Probe connection candidates and classify their reachability."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import httpx

from media_reach.config import Settings
from media_reach.metadata.base import ServerMetadataPort
from media_reach.models import ConnectionCandidate, ConnectionState
from media_reach.naming import origin_names
from media_reach.probe.base import ReachabilityProberPort
from media_reach.transport.base import TransportPort
from media_reach.transport.http import HttpxTransport
from media_reach.urls import build_url

logger = logging.getLogger(__name__)

_HTTP_UNAUTHORIZED = 401


async def probe(
    candidate: ConnectionCandidate,
    server: ServerMetadataPort,
    transport: TransportPort,
    *,
    settings: Settings | None = None,
    log: logging.Logger | None = None,
) -> ConnectionState:
    """GET the candidate's root resource and store the resulting state on it.

    Outcomes:
    - response recognized by ``server.collect_from_root`` -> reachable
    - response not recognized (bad XML, another server) -> unreachable
    - request cancelled through the transport -> unknown
    - HTTP 401 -> unauthorized
    - anything else (timeout, refused, DNS) -> unreachable

    Never raises for network outcomes and never retries.
    """
    settings = settings or Settings()
    log = log or logger

    url = build_url(candidate, "/", token_parameter=settings.token_parameter)
    # Borrow the server's token for this request only; the candidate keeps its own.
    if not candidate.token and server.has_auth_token():
        url = url.with_query_param(settings.token_parameter, server.any_token())

    response = await transport.get(
        url.render(),
        timeout=settings.probe_timeout_seconds,
        headers={"Accept": settings.accept_header},
    )

    if response.ok:
        if server.collect_from_root(response.body):
            state = ConnectionState.REACHABLE
        else:
            state = ConnectionState.UNREACHABLE
    elif response.cancelled:
        state = ConnectionState.UNKNOWN
    elif response.status_code == _HTTP_UNAUTHORIZED:
        state = ConnectionState.UNAUTHORIZED
    else:
        state = ConnectionState.UNREACHABLE

    log.debug(
        "Probed %s %s -> %s%s",
        candidate.endpoint.render(),
        origin_names(candidate.origins),
        state,
        f" ({response.error})" if response.error else "",
    )
    candidate.state = state
    return state


@dataclass(frozen=True, slots=True)
class DefaultReachabilityProber:
    """Adapter for ReachabilityProberPort."""

    settings: Settings = field(default_factory=Settings)

    async def probe(
        self,
        candidate: ConnectionCandidate,
        server: ServerMetadataPort,
        transport: TransportPort,
    ) -> ConnectionState:
        """GET the candidate's root and store the resulting state on it."""
        return await probe(candidate, server, transport, settings=self.settings)


async def probe_all(
    candidates: Sequence[ConnectionCandidate],
    server: ServerMetadataPort,
    http_client: httpx.AsyncClient,
    *,
    prober: ReachabilityProberPort | None = None,
    transport_factory: Callable[[httpx.AsyncClient], TransportPort] = HttpxTransport,
) -> list[ConnectionState]:
    """Probe all candidates concurrently, one transport per candidate.

    Returns states in the same order as ``candidates``.
    """
    prober = prober or DefaultReachabilityProber()
    return list(
        await asyncio.gather(
            *(prober.probe(c, server, transport_factory(http_client)) for c in candidates)
        )
    )
