"""media-reach: reconcile and probe the known routes to a media server.

Typical round::

    candidates = reconcile(discovered)
    await probe_all(candidates, server, http_client)
    active = first_reachable(candidates)
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

from media_reach.config import Settings, load_settings
from media_reach.equality import equals
from media_reach.merge import merge
from media_reach.models import (
    ConnectionCandidate,
    ConnectionOrigin,
    ConnectionState,
    Endpoint,
)
from media_reach.probe.prober import DefaultReachabilityProber, probe_all
from media_reach.reconcile import first_reachable, reconcile
from media_reach.urls import build_url, plain_url

_DISTRIBUTION = "media-reach"
_UNINSTALLED_VERSION = "0.0.0+local"


def _installed_version() -> str:
    """Version of the installed distribution, or a local marker for source checkouts."""
    try:
        return _distribution_version(_DISTRIBUTION)
    except PackageNotFoundError:
        return _UNINSTALLED_VERSION


__version__ = _installed_version()

__all__ = [
    "ConnectionCandidate",
    "ConnectionOrigin",
    "ConnectionState",
    "DefaultReachabilityProber",
    "Endpoint",
    "Settings",
    "build_url",
    "equals",
    "first_reachable",
    "load_settings",
    "merge",
    "plain_url",
    "probe_all",
    "reconcile",
]
