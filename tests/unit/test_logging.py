"""Tests for logging helpers and settings."""

import time

from src.config import Settings, load_settings
from src.infrastructure.logging import (
    Timer,
    correlation_id,
    redact_secret,
    set_correlation_id,
)


class TestRedactSecret:
    def test_replaces_every_occurrence(self) -> None:
        assert redact_secret("key=abc and abc", "abc") == "key=[REDACTED] and [REDACTED]"

    def test_empty_secret_leaves_value(self) -> None:
        assert redact_secret("nothing to hide", "") == "nothing to hide"

    def test_empty_value(self) -> None:
        assert redact_secret("", "abc") == ""


class TestTimer:
    def test_measures_duration(self) -> None:
        with Timer() as t:
            time.sleep(0.01)

        assert t.duration_ms >= 5


class TestCorrelationId:
    def test_set_and_get(self) -> None:
        set_correlation_id("req-1")

        assert correlation_id.get() == "req-1"


class TestSettings:
    def test_reads_key_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")

        assert load_settings().gemini_api_key == "from-env"

    def test_key_defaults_to_empty(self, monkeypatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        assert load_settings().gemini_api_key == ""

    def test_service_name_default(self) -> None:
        assert Settings().service_name == "prompt-relay"

    def test_load_settings_is_fresh(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "first")
        first = load_settings()
        monkeypatch.setenv("GEMINI_API_KEY", "second")

        assert first.gemini_api_key == "first"
        assert load_settings().gemini_api_key == "second"
