"""Testes das settings carregadas de env."""

from __future__ import annotations

import pytest

from config.settings import (
    GMAIL_MODIFY_SCOPE,
    BaseSettings,
    GmailSettings,
    SyncSettings,
    UpdateSettings,
    get_base_settings,
    get_gmail_settings,
    get_sync_settings,
    get_update_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    getters = (get_base_settings, get_gmail_settings, get_sync_settings, get_update_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()


class TestSyncSettings:
    def test_defaults_are_valid(self) -> None:
        settings = SyncSettings()

        assert settings.validate() == []
        assert settings.poll_interval_seconds == 60
        assert settings.max_reconnect_attempts == 5
        assert settings.privacy_level == "full"

    def test_invalid_values_are_reported(self) -> None:
        settings = SyncSettings(
            poll_interval_seconds=0,
            reconnect_interval_seconds=-1,
            max_reconnect_attempts=1,
            unstack_boundary=0,
        )

        errors = settings.validate()

        assert len(errors) == 4
        assert any("SYNC_MAX_RECONNECT_ATTEMPTS" in error for error in errors)

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SYNC_POLL_INTERVAL_SECONDS", "120")
        monkeypatch.setenv("SYNC_SPAM_NOTIFICATION", "off")
        monkeypatch.setenv("SYNC_PRIVACY_LEVEL", "HIDDEN_NAMES")

        settings = get_sync_settings()

        assert settings.poll_interval_seconds == 120
        assert settings.spam_notification is False
        assert settings.privacy_level == "hidden_names"

    def test_unknown_privacy_falls_back_to_full(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SYNC_PRIVACY_LEVEL", "secret")

        assert get_sync_settings().privacy_level == "full"


class TestGmailSettings:
    def test_missing_token_file_is_an_error(self) -> None:
        errors = GmailSettings().validate_settings()

        assert errors == ["GMAIL_TOKEN_FILE nao configurado"]

    def test_loads_scopes_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMAIL_TOKEN_FILE", "/tmp/token.json")
        monkeypatch.setenv("GMAIL_SCOPES", f"{GMAIL_MODIFY_SCOPE}, extra-scope ,")

        settings = get_gmail_settings()

        assert settings.token_file == "/tmp/token.json"
        assert settings.scopes == [GMAIL_MODIFY_SCOPE, "extra-scope"]
        assert settings.validate_settings() == []

    def test_blank_scopes_env_keeps_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMAIL_SCOPES", "   ")

        assert get_gmail_settings().scopes == [GMAIL_MODIFY_SCOPE]


class TestUpdateSettings:
    def test_invalid_period_env_falls_back_to_week(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("UPDATE_PERIOD", "yearly")
        monkeypatch.setenv("UPDATE_ENABLED", "no")

        settings = get_update_settings()

        assert settings.period == "week"
        assert settings.enabled is False

    def test_validate_rejects_unknown_period(self) -> None:
        settings = UpdateSettings(period="yearly")  # type: ignore[arg-type]

        assert settings.validate() == ["UPDATE_PERIOD inválido: yearly"]


class TestBaseSettings:
    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")

        settings = get_base_settings()

        assert settings.is_production
        assert settings.is_strict

    def test_debug_defaults_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("DEBUG", "1")

        assert get_base_settings().log_level == "DEBUG"

    def test_validate_reports_bad_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()

        assert errors == ["LOG_LEVEL inválido: LOUD"]
