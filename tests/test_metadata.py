"""Tests for RootServerMetadata (metadata/root.py)."""

from __future__ import annotations

from media_reach.metadata.root import RootServerMetadata

_ROOT_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<MediaContainer size="0" friendlyName="Living Room" '
    'machineIdentifier="abc123" version="1.40.0.7998"/>'
)


class TestCollectFromRoot:
    def test_recognizes_expected_server(self):
        server = RootServerMetadata(machine_identifier="abc123")

        assert server.collect_from_root(_ROOT_XML) is True
        assert server.name == "Living Room"
        assert server.version == "1.40.0.7998"

    def test_adopts_identifier_when_none_expected(self):
        server = RootServerMetadata()

        assert server.collect_from_root(_ROOT_XML) is True
        assert server.machine_identifier == "abc123"

    def test_rejects_other_server(self):
        server = RootServerMetadata(machine_identifier="other")

        assert server.collect_from_root(_ROOT_XML) is False
        assert server.name == ""

    def test_rejects_malformed_xml(self):
        assert RootServerMetadata().collect_from_root("<MediaContainer") is False

    def test_rejects_unexpected_root_element(self):
        assert RootServerMetadata().collect_from_root('<html machineIdentifier="abc123"/>') is False

    def test_rejects_missing_identifier(self):
        assert RootServerMetadata().collect_from_root("<MediaContainer/>") is False


class TestTokens:
    def test_no_tokens(self):
        server = RootServerMetadata()
        assert server.has_auth_token() is False
        assert server.any_token() == ""

    def test_first_non_empty_token(self):
        server = RootServerMetadata(tokens=["", "T1", "T2"])
        assert server.has_auth_token() is True
        assert server.any_token() == "T1"
