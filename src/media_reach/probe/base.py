"""Port: candidate reachability probing."""

from __future__ import annotations

from typing import Protocol

from media_reach.metadata.base import ServerMetadataPort
from media_reach.models import ConnectionCandidate, ConnectionState
from media_reach.transport.base import TransportPort


class ReachabilityProberPort(Protocol):
    """Port for classifying whether a candidate can be used."""

    async def probe(
        self,
        candidate: ConnectionCandidate,
        server: ServerMetadataPort,
        transport: TransportPort,
    ) -> ConnectionState:
        """GET the candidate's root and store the resulting state on it."""
        ...
