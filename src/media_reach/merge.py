"""Fold two candidates for the same server into one."""

from __future__ import annotations

from media_reach.models import ConnectionCandidate, ConnectionState


def merge(primary: ConnectionCandidate, other: ConnectionCandidate) -> ConnectionCandidate:
    """Fold ``other`` into ``primary`` and return the result as a new candidate.

    ``primary`` wins every field except where a rule below says otherwise:

    - endpoint: ``other``'s only when it is secure and ``primary``'s is not.
    - origins: union of both.
    - token: ``other``'s when ``primary`` has none, or when ``other`` carries a
      different non-empty token.
    - state: ``reachable`` if either side is reachable, else ``primary``'s.
    - refreshed: always true.

    Not commutative; fold into a stable primary in a fixed order.
    """
    endpoint = primary.endpoint
    if not primary.is_secure and other.is_secure:
        endpoint = other.endpoint

    token = primary.token
    if not token or (other.token and other.token != token):
        token = other.token

    state = primary.state
    if state != ConnectionState.REACHABLE and other.state == ConnectionState.REACHABLE:
        state = ConnectionState.REACHABLE

    return ConnectionCandidate(
        endpoint=endpoint,
        origins=primary.origins | other.origins,
        token=token,
        state=state,
        refreshed=True,
    )
