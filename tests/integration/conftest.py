"""Integration-test fixtures for deterministic CLI configuration."""

from __future__ import annotations

import pytest

from limace.config import SEPARATOR_ENV_KEY


@pytest.fixture(autouse=True)
def _clear_separator_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from changing CLI separator resolution."""

    monkeypatch.delenv(SEPARATOR_ENV_KEY, raising=False)
