"""Exception hierarchy for media-reach.

All exceptions inherit from MediaReachError (single catch point).
Network outcomes are never raised: probes fold them into a ConnectionState.
"""

from __future__ import annotations


class MediaReachError(Exception):
    """Base exception for all media-reach errors."""


class ConfigError(MediaReachError):
    """Invalid setting supplied through the environment."""
