"""Shared pytest fixtures and configuration for the vidkit test suite.

Guidelines
----------
* No internet access in any test.
* Engine tests must be pure: no settings, no environment.
* CLI tests get a fresh settings cache and a clean ``VIDKIT_*`` environment.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from vidkit.config.settings import get_settings

VIDKIT_ENV_VARS = (
    "VIDKIT_ALLOW_NO_PROTOCOL",
    "VIDKIT_ALLOW_NO_WWW",
    "VIDKIT_ALLOW_QUERY_PARAMS",
    "VIDKIT_LOG_LEVEL",
)

YOUTUBE_ID = "dQw4w9WgXcQ"
TIKTOK_ID = "1234567890123456789"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from ambient ``VIDKIT_*`` variables and cached settings."""

    for name in VIDKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
