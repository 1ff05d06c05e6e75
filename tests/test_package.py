"""Tests for the top-level package surface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

import media_reach
from media_reach.models import ConnectionState


class TestVersion:
    def test_matches_installed_distribution(self):
        assert media_reach.__version__ == distribution_version("media-reach")

    def test_source_checkout_gets_local_marker(self, monkeypatch):
        def _missing(_: str) -> str:
            raise PackageNotFoundError

        monkeypatch.setattr(media_reach, "_distribution_version", _missing)

        assert media_reach._installed_version() == "0.0.0+local"


class TestPublicApi:
    def test_all_names_resolve(self):
        for name in media_reach.__all__:
            assert getattr(media_reach, name) is not None

    def test_reexports_are_the_module_objects(self):
        from media_reach.probe.prober import probe_all
        from media_reach.reconcile import reconcile

        assert media_reach.probe_all is probe_all
        assert media_reach.reconcile is reconcile
        assert media_reach.ConnectionState is ConnectionState
