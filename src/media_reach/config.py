"""Runtime settings for probing and URL rendering."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from media_reach.errors import ConfigError

_TIMEOUT_ENV = "MEDIA_REACH_PROBE_TIMEOUT"
_TOKEN_PARAMETER_ENV = "MEDIA_REACH_TOKEN_PARAMETER"
_DIRECT_SUFFIX_ENV = "MEDIA_REACH_DIRECT_SUFFIX"

DEFAULT_PROBE_TIMEOUT_SECONDS = 3.0
DEFAULT_ACCEPT_HEADER = "application/xml"
ACCESS_TOKEN_PARAMETER = "X-Plex-Token"

# Wildcard-certificate domain for per-server hostnames like 10-0-0-2.<hash>.plex.direct
DIRECT_TLS_SUFFIX = ".plex.direct"


@dataclass(frozen=True, slots=True)
class Settings:
    probe_timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS
    accept_header: str = DEFAULT_ACCEPT_HEADER
    token_parameter: str = ACCESS_TOKEN_PARAMETER
    direct_suffix: str = DIRECT_TLS_SUFFIX


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``env`` (defaults to ``os.environ``).

    Unset or blank variables keep their defaults.

    Raises:
        ConfigError: If the probe timeout is not a positive number.
    """
    source = env if env is not None else os.environ

    timeout = DEFAULT_PROBE_TIMEOUT_SECONDS
    raw_timeout = source.get(_TIMEOUT_ENV, "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(
                f"{_TIMEOUT_ENV} must be a number of seconds, got '{raw_timeout}'."
            ) from exc
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"{_TIMEOUT_ENV} must be a finite positive number, got {timeout}.")

    token_parameter = source.get(_TOKEN_PARAMETER_ENV, "").strip() or ACCESS_TOKEN_PARAMETER
    direct_suffix = source.get(_DIRECT_SUFFIX_ENV, "").strip() or DIRECT_TLS_SUFFIX
    if not direct_suffix.startswith("."):
        direct_suffix = f".{direct_suffix}"

    return Settings(
        probe_timeout_seconds=timeout,
        token_parameter=token_parameter,
        direct_suffix=direct_suffix,
    )
