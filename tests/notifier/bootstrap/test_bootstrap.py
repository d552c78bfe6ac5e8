"""Testes do composition root e do NotifierRuntime."""

from __future__ import annotations

import pytest

from config.settings import (
    SyncSettings,
    UpdateSettings,
    get_base_settings,
    get_gmail_settings,
    get_sync_settings,
    get_update_settings,
)
from notifier.bootstrap import validate_runtime_settings
from notifier.bootstrap.clients import create_auth_session
from notifier.runtime import NotifierRuntime
from tests.fakes.fake_gates import FakeAuthSession, FakeConnectivity
from tests.fakes.fake_mail_client import FakeMailClient
from tests.fakes.recording_surface import RecordingSurface

WEB_BASE_URL = "https://mail.google.com/mail/u/0/"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    getters = (get_base_settings, get_gmail_settings, get_sync_settings, get_update_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()


def _runtime(client: FakeMailClient | None = None) -> NotifierRuntime:
    mail_client = client or FakeMailClient()
    return NotifierRuntime(
        sync_settings=SyncSettings(),
        update_settings=UpdateSettings(enabled=False),
        web_base_url=WEB_BASE_URL,
        mail_client_factory=lambda: mail_client,
        connectivity=FakeConnectivity(),
        auth=FakeAuthSession(),
        surface=RecordingSurface(),
    )


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("GMAIL_TOKEN_FILE", raising=False)

        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("GMAIL_TOKEN_FILE", raising=False)

        with pytest.raises(RuntimeError, match="GMAIL_TOKEN_FILE"):
            validate_runtime_settings()

    def test_production_with_token_passes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("GMAIL_TOKEN_FILE", "/tmp/token.json")
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        validate_runtime_settings()


def test_create_auth_session_requires_token_file() -> None:
    from config.settings import GmailSettings

    with pytest.raises(ValueError, match="GMAIL_TOKEN_FILE"):
        create_auth_session(GmailSettings())


class TestNotifierRuntime:
    def test_context_url_defaults_to_inbox(self) -> None:
        runtime = _runtime()

        assert runtime.context_url() == "https://mail.google.com/mail/u/0/#inbox"

        runtime.state.last_context_tag = "#spam"
        assert runtime.context_url() == "https://mail.google.com/mail/u/0/#spam"

    def test_apply_settings_rejects_invalid(self) -> None:
        runtime = _runtime()

        with pytest.raises(ValueError, match="SYNC_POLL_INTERVAL_SECONDS"):
            runtime.apply_settings(SyncSettings(poll_interval_seconds=0))

    def test_pause_preset_unknown_raises(self) -> None:
        runtime = _runtime()

        with pytest.raises(ValueError, match="Pausa desconhecida"):
            runtime.pause("forever-ish")

    @pytest.mark.asyncio
    async def test_start_runs_first_pass_and_shutdown_stops_timers(self) -> None:
        client = FakeMailClient()
        client.set_inbox(0)
        runtime = _runtime(client)

        await runtime.start()

        assert runtime.state.unread_count == 0
        assert runtime.presenter.account == "user@example.com"
        assert "Last sync:" in runtime.presenter.text

        await runtime.shutdown()

        assert runtime.schedule.is_paused is False

    @pytest.mark.asyncio
    async def test_apply_settings_updates_poll_interval(self) -> None:
        runtime = _runtime()
        runtime.schedule.start()

        runtime.apply_settings(SyncSettings(poll_interval_seconds=300))

        assert runtime.schedule.interval == 300
        await runtime.shutdown()

    @pytest.mark.asyncio
    async def test_toggling_spam_notification_syncs_immediately(self) -> None:
        client = FakeMailClient()
        client.set_spam(2)
        client.set_inbox(1)
        runtime = _runtime(client)
        await runtime.start()

        runtime.apply_settings(SyncSettings(spam_notification=False))
        await runtime.shutdown()

        assert client.calls_named("get_label") == ["SPAM", "INBOX"]

    @pytest.mark.asyncio
    async def test_unrelated_settings_change_does_not_sync(self) -> None:
        client = FakeMailClient()
        client.set_inbox(0)
        runtime = _runtime(client)
        await runtime.start()

        runtime.apply_settings(SyncSettings(poll_interval_seconds=90))
        await runtime.shutdown()

        assert client.calls_named("get_label") == ["SPAM", "INBOX"]
