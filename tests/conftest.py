from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kycportal.config import base

if TYPE_CHECKING:
    from collections.abc import Generator

    from pytest import MonkeyPatch


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _patch_settings(monkeypatch: MonkeyPatch) -> Generator[None, None, None]:
    """Point the settings at test values and drop the cached instance."""
    monkeypatch.setenv("KYCPORTAL_ENV_FILE", ".env.testing")
    monkeypatch.setenv("APP_NAME", "KYC Portal Test")
    monkeypatch.setenv("STORAGE_BUCKET", "kyc-test")
    monkeypatch.setenv("STORAGE_SIGNED_URL_EXPIRY", "60")
    monkeypatch.setenv("MESSAGING_EMAIL_ENDPOINT", "http://messaging.test/send-email")
    monkeypatch.setenv("MESSAGING_WHATSAPP_ENDPOINT", "http://messaging.test/send-whatsapp")
    base.get_settings.cache_clear()
    yield
    base.get_settings.cache_clear()
