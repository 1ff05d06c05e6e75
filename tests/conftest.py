"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass
class FakeServer:
    """Server metadata with a fixed verdict on root documents."""

    recognizes: bool = True
    tokens: list[str] = field(default_factory=list)
    bodies: list[str] = field(default_factory=list)

    def has_auth_token(self) -> bool:
        return bool(self.tokens)

    def any_token(self) -> str:
        return self.tokens[0] if self.tokens else ""

    def collect_from_root(self, body: str) -> bool:
        self.bodies.append(body)
        return self.recognizes


@pytest.fixture()
def fake_server() -> FakeServer:
    return FakeServer()
