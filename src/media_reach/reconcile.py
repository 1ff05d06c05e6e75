"""Group duplicate candidates of one server and fold each group into one."""

from __future__ import annotations

from collections.abc import Iterable

from media_reach.config import DIRECT_TLS_SUFFIX
from media_reach.equality import equals
from media_reach.merge import merge
from media_reach.models import ConnectionCandidate, ConnectionState


def reconcile(
    candidates: Iterable[ConnectionCandidate],
    *,
    direct_suffix: str = DIRECT_TLS_SUFFIX,
) -> list[ConnectionCandidate]:
    """Fold each candidate into the first earlier group it equals.

    The first candidate of a group stays primary and later duplicates are
    merged into it in input order, so the result is reproducible. Groups
    keep the order in which they first appeared.
    """
    groups: list[ConnectionCandidate] = []
    for candidate in candidates:
        for index, existing in enumerate(groups):
            if equals(existing, candidate, direct_suffix=direct_suffix):
                groups[index] = merge(existing, candidate)
                break
        else:
            groups.append(candidate)
    return groups


def first_reachable(
    candidates: Iterable[ConnectionCandidate],
) -> ConnectionCandidate | None:
    return next((c for c in candidates if c.state == ConnectionState.REACHABLE), None)
