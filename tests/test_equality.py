"""Tests for duplicate detection (equality.py)."""

from __future__ import annotations

import logging

import pytest

from media_reach.equality import equals, tokens_match
from media_reach.models import ConnectionCandidate, ConnectionOrigin


def _candidate(
    host: str = "10.0.0.2",
    scheme: str = "http",
    token: str = "",
    port: int = 32400,
) -> ConnectionCandidate:
    return ConnectionCandidate.create(ConnectionOrigin.DISCOVERED, host, port, scheme, token)


class TestTokensMatch:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", True),
            ("", "T", True),
            ("T", "", True),
            ("T", "T", True),
            ("T", "U", False),
        ],
    )
    def test_matrix(self, a, b, expected):
        assert tokens_match(a, b) is expected
        assert tokens_match(b, a) is expected


class TestEquals:
    def test_reflexive(self):
        a = _candidate(token="T")
        assert equals(a, a) is True

    def test_symmetric_with_one_empty_token(self):
        a = _candidate(token="")
        b = _candidate(token="T")
        assert equals(a, b) is True
        assert equals(b, a) is True

    def test_different_tokens_are_not_equal(self):
        assert equals(_candidate(token="T"), _candidate(token="U")) is False

    def test_different_hosts_are_not_equal(self):
        assert equals(_candidate(host="10.0.0.2"), _candidate(host="10.0.0.3")) is False

    def test_different_ports_are_not_equal(self):
        assert equals(_candidate(port=32400), _candidate(port=32401)) is False

    def test_direct_hostname_equals_decoded_local_address(self):
        local = _candidate(host="10.0.0.2", scheme="http")
        direct = _candidate(host="10-0-0-2.0123abcd.plex.direct", scheme="https", token="T")
        assert equals(local, direct) is True
        assert equals(direct, local) is True

    def test_none_is_never_equal(self):
        assert equals(_candidate(), None) is False

    def test_mismatch_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="media_reach.equality"):
            equals(_candidate(host="10.0.0.2"), _candidate(host="10.0.0.3"))

        assert "10.0.0.2" in caplog.text
        assert "10.0.0.3" in caplog.text
