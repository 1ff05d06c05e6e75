"""Port: per-server metadata consulted while probing."""

from __future__ import annotations

from typing import Protocol


class ServerMetadataPort(Protocol):
    """Port for the logical server a candidate is believed to reach."""

    def has_auth_token(self) -> bool:
        """Return True when some access token is known for this server."""
        ...

    def any_token(self) -> str:
        """Return one usable access token, or "" when none is known."""
        ...

    def collect_from_root(self, body: str) -> bool:
        """Parse a root response; True when it belongs to this server."""
        ...
