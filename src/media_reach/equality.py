"""Duplicate detection between connection candidates."""

from __future__ import annotations

import logging

from media_reach.config import DIRECT_TLS_SUFFIX
from media_reach.models import ConnectionCandidate
from media_reach.urls import plain_url

logger = logging.getLogger(__name__)


def tokens_match(a: str, b: str) -> bool:
    """An empty token matches anything; two non-empty tokens must be identical."""
    if not a or not b:
        return True
    return a == b


def equals(
    a: ConnectionCandidate,
    b: ConnectionCandidate | None,
    *,
    direct_suffix: str = DIRECT_TLS_SUFFIX,
    log: logging.Logger | None = None,
) -> bool:
    """Return True when ``a`` and ``b`` describe the same route to a server.

    Compares plain URLs (so a ``.plex.direct`` hostname equals its decoded
    local address) and tokens under ``tokens_match``.
    """
    if b is None:
        return False
    log = log or logger

    url_a = plain_url(a.endpoint, direct_suffix=direct_suffix)
    url_b = plain_url(b.endpoint, direct_suffix=direct_suffix)
    url_matches = url_a == url_b
    token_matches = tokens_match(a.token, b.token)

    if not url_matches:
        log.debug("Candidate URLs differ: '%s' != '%s'", url_a, url_b)
    if not token_matches:
        log.debug("Candidate tokens differ for '%s'", url_a)

    return url_matches and token_matches
