"""Tests for settings loading and localised messages."""

from __future__ import annotations

import pytest

from app.core.config import Settings
from app.core.messages import get_message


def test_settings_reads_unprefixed_youtube_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_YOUTUBE_API_KEY", raising=False)
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")

    assert Settings(_env_file=None).youtube_api_key == "from-env"


def test_settings_blank_api_key_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_YOUTUBE_API_KEY", raising=False)
    monkeypatch.setenv("YOUTUBE_API_KEY", "   ")

    assert Settings(_env_file=None).youtube_api_key is None


def test_settings_splits_cors_origins() -> None:
    settings = Settings(_env_file=None, cors_origins="https://a.example, https://b.example,")
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_get_message_falls_back_to_english() -> None:
    assert get_message("server_error", "fr") == "Server error"
    assert get_message("server_error", "ko_KR") == "서버 오류"
    assert get_message("missing_channel") == "Missing ?channel="
