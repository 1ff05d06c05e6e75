"""Human-readable labels for diagnostics."""

from __future__ import annotations

from collections.abc import Iterable

from media_reach.config import DIRECT_TLS_SUFFIX
from media_reach.models import ConnectionCandidate, ConnectionOrigin, ConnectionState
from media_reach.urls import plain_url

_STATE_NAMES = {
    ConnectionState.REACHABLE: "reachable",
    ConnectionState.UNAUTHORIZED: "unauthorized",
    ConnectionState.UNKNOWN: "unknown",
}

# Rendering order is fixed regardless of set iteration order.
_ORIGIN_LABELS = (
    (ConnectionOrigin.DISCOVERED, "(discovered)"),
    (ConnectionOrigin.MANUAL, "(manual)"),
    (ConnectionOrigin.REMOTE_DIRECTORY, "(plex.tv)"),
)


def state_name(state: ConnectionState) -> str:
    return _STATE_NAMES.get(state, "unreachable")


def origin_names(origins: Iterable[ConnectionOrigin]) -> str:
    present = set(origins)
    return "".join(label for origin, label in _ORIGIN_LABELS if origin in present)


def describe(
    candidate: ConnectionCandidate,
    *,
    direct_suffix: str = DIRECT_TLS_SUFFIX,
) -> str:
    """One-line summary, e.g. ``http://10.0.0.2:32400/ (manual) reachable``."""
    url = plain_url(candidate.endpoint, direct_suffix=direct_suffix)
    return f"{url} {origin_names(candidate.origins)} {state_name(candidate.state)}"
