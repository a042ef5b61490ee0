from __future__ import annotations

import os

import pytest

from core.domain.errors import SecureRandomUnavailableError


class FixedByteSource:
    """Deterministic source: every byte is `value` (uint32 draws are constant)."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes([self.value]) * n


class FailingSource:
    def token_bytes(self, n: int) -> bytes:
        raise SecureRandomUnavailableError("no entropy")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep AppSettings away from the developer's .env files and env vars."""

    for key in list(os.environ):
        if key.upper().startswith("PASSFORGE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def zero_source() -> FixedByteSource:
    return FixedByteSource(0)


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture
def ones_source() -> FixedByteSource:
    return FixedByteSource(0xFF)
