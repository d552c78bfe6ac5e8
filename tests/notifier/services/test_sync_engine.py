"""Testes do SyncEngine: guards, fluxo principal e roteamento de falhas."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import timedelta

import pytest

from config.settings import SyncSettings
from fsm import ReconnectPhase
from notifier.domain.intents import (
    ClearedIntent,
    ErrorIntent,
    SoundKind,
    SpamIntent,
    UnreadManyIntent,
    UnreadSingleIntent,
)
from notifier.domain.state import SYNC_AFFORDANCES, Affordance, StatusKind
from notifier.services.notification_policy import GENERIC_MESSAGE_LABEL
from tests.fakes.fake_mail_client import FakeMailClient, make_message
from tests.fakes.harness import build_harness
from utils.errors import (
    AuthRefreshError,
    ConnectivityError,
    RemoteApiError,
    StatisticsFetchError,
)

BASE_SETTINGS = SyncSettings(
    poll_interval_seconds=60,
    reconnect_interval_seconds=15,
    max_reconnect_attempts=3,
)


def _client_with_unread(count: int, **message_kwargs) -> FakeMailClient:
    client = FakeMailClient(
        messages=[make_message(f"msg-{index}", **message_kwargs) for index in range(1, count + 1)]
    )
    client.set_inbox(count)
    return client


class TestUnchangedSuppression:
    @pytest.mark.asyncio
    async def test_non_manual_pass_with_same_count_emits_nothing(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(2))

        await h.engine.run()
        await h.engine.run()

        assert h.presenter.intent_kinds == ["unread_many"]
        assert h.state.unread_count == 2

    @pytest.mark.asyncio
    async def test_manual_pass_never_short_circuits(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(2))

        await h.engine.run()
        await h.engine.run(manual=True)

        assert h.presenter.intent_kinds == ["unread_many", "unread_many"]
        assert StatusKind.SYNCING in h.presenter.status_kinds

    @pytest.mark.asyncio
    async def test_zero_then_three_then_three(self) -> None:
        client = FakeMailClient()
        client.set_inbox(0)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()
        client.messages = [make_message(f"msg-{i}") for i in range(3)]
        client.set_inbox(3)
        await h.engine.run()
        await h.engine.run()

        assert h.presenter.intents == [
            ClearedIntent(),
            UnreadManyIntent(count=3, sound=SoundKind.ASTERISK),
        ]

    @pytest.mark.asyncio
    async def test_non_manual_pass_does_not_show_syncing_status(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))

        await h.engine.run()

        assert StatusKind.SYNCING not in h.presenter.status_kinds
        assert (StatusKind.HAS_MAIL, 1, None) in h.presenter.statuses
        assert h.presenter.affordances[0] == (SYNC_AFFORDANCES, True)


class TestSpam:
    @pytest.mark.asyncio
    async def test_spam_preempts_inbox(self) -> None:
        client = _client_with_unread(5)
        client.set_spam(2)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert h.presenter.intents == [SpamIntent(count=2, sound=SoundKind.EXCLAMATION)]
        assert client.calls_named("get_label") == ["SPAM"]
        assert h.state.last_context_tag == "#spam"
        # Inbox nao foi consultada: contagem segue desconhecida
        assert h.state.unread_count is None

    @pytest.mark.asyncio
    async def test_repeated_spam_is_suppressed_unless_manual(self) -> None:
        client = FakeMailClient()
        client.set_spam(1)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()
        await h.engine.run()
        await h.engine.run(manual=True)

        assert h.presenter.intent_kinds == ["spam", "spam"]

    @pytest.mark.asyncio
    async def test_zero_spam_still_fetches_inbox(self) -> None:
        client = _client_with_unread(1)
        client.set_spam(0)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert client.calls_named("get_label") == ["SPAM", "INBOX"]
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_spam_disabled_skips_spam_label(self) -> None:
        client = _client_with_unread(1)
        client.set_spam(4)
        settings = replace(BASE_SETTINGS, spam_notification=False)
        h = build_harness(settings, client=client)

        await h.engine.run()

        assert "SPAM" not in client.calls_named("get_label")
        assert h.presenter.intent_kinds == ["unread_single"]


class TestSingleMessagePrivacy:
    @pytest.mark.asyncio
    async def test_full_privacy_shows_sender_and_subject(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1, subject="Invoice"))

        await h.engine.run()

        intent = h.presenter.intents[0]
        assert isinstance(intent, UnreadSingleIntent)
        assert intent.title == "Alice Example"
        assert intent.body == "Invoice"
        assert h.state.last_context_tag == "#inbox/msg-1"

    @pytest.mark.asyncio
    async def test_hidden_names_with_empty_snippet_uses_generic_body(self) -> None:
        settings = replace(BASE_SETTINGS, privacy_level="hidden_names")
        h = build_harness(settings, client=_client_with_unread(1, snippet=""))

        await h.engine.run()

        intent = h.presenter.intents[0]
        assert isinstance(intent, UnreadSingleIntent)
        assert intent.body == GENERIC_MESSAGE_LABEL
        assert intent.title == "Alice Example"

    @pytest.mark.asyncio
    async def test_privacy_none_emits_aggregate(self) -> None:
        settings = replace(BASE_SETTINGS, privacy_level="none")
        h = build_harness(settings, client=_client_with_unread(1))

        await h.engine.run()

        assert h.presenter.intents == [UnreadManyIntent(count=1, sound=SoundKind.ASTERISK)]

    @pytest.mark.asyncio
    async def test_many_unread_tag_points_to_inbox(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(3))

        await h.engine.run()

        assert h.state.last_context_tag == "#inbox"
        # Apenas um id e uma mensagem sao buscados para a amostra
        assert h.client.calls_named("list_unread_message_ids") == [1]
        assert h.client.calls_named("get_message") == ["msg-1"]

    @pytest.mark.asyncio
    async def test_audio_disabled_requests_no_sound(self) -> None:
        settings = replace(BASE_SETTINGS, audio_notification=False)
        h = build_harness(settings, client=_client_with_unread(2))

        await h.engine.run()

        assert h.presenter.intents == [UnreadManyIntent(count=2)]

    @pytest.mark.asyncio
    async def test_message_notification_disabled_updates_status_only(self) -> None:
        settings = replace(BASE_SETTINGS, message_notification=False)
        h = build_harness(settings, client=_client_with_unread(2))

        await h.engine.run()

        assert h.presenter.intents == []
        assert (StatusKind.HAS_MAIL, 2, None) in h.presenter.statuses
        assert h.state.unread_count == 2
        assert h.client.calls_named("get_message") == []


class TestGuards:
    @pytest.mark.asyncio
    async def test_update_in_progress_drops_pass_silently(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.update_gate.updating = True
        before = h.state.last_sync_time
        h.clock.advance(minutes=1)

        await h.engine.run(manual=True)

        assert h.client.calls == []
        assert h.presenter.intents == []
        assert h.presenter.sync_times == []
        assert h.state.last_sync_time == before

    @pytest.mark.asyncio
    async def test_manual_sync_while_paused_resumes_instead(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.schedule.pause(timedelta(minutes=30))

        await h.engine.run(manual=True)

        assert not h.schedule.is_paused
        assert h.client.calls == []
        assert h.poll_timer.fire_now_requests == 1

        await h.poll_timer.flush_fire_now()

        assert h.presenter.intent_kinds == ["unread_single"]
        assert StatusKind.SYNCING in h.presenter.status_kinds

    @pytest.mark.asyncio
    async def test_non_manual_pass_while_paused_runs(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.schedule.pause(None)

        await h.engine.run()

        assert h.schedule.is_paused
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_update_ping_failure_is_swallowed(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.update_gate.error = RuntimeError("update service down")

        await h.engine.run()

        assert h.update_gate.pings == 1
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_sync_time_is_stamped_once_per_pass(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.clock.advance(seconds=30)

        await h.engine.run()

        assert h.presenter.sync_times == [h.clock.now]
        assert h.state.last_sync_time == h.clock.now


class TestConnectivity:
    @pytest.mark.asyncio
    async def test_offline_pass_hands_over_to_supervisor(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.connectivity.available = False

        await h.engine.run()

        assert h.client.calls == []
        assert h.state.reconnection_attempts == 1
        assert h.supervisor.phase is ReconnectPhase.PROBING
        assert h.retry_timer.armed
        assert h.retry_timer.interval == 15
        assert not h.poll_timer.armed
        assert h.presenter.affordances == [(SYNC_AFFORDANCES, False)]
        assert h.presenter.status_kinds == [StatusKind.RECONNECTING]
        # A passada nao entrou no fluxo principal
        assert h.presenter.sync_times == []
        # O supervisor nao re-checa a rede no start
        assert h.connectivity.probes == 1

    @pytest.mark.asyncio
    async def test_lost_then_waiting_then_recovered_runs_sync(self) -> None:
        client = FakeMailClient()
        client.set_inbox(0)
        h = build_harness(BASE_SETTINGS, client=client)
        h.connectivity.available = False

        await h.engine.run()
        await h.retry_timer.tick()

        assert h.state.reconnection_attempts == 2
        assert h.supervisor.phase is ReconnectPhase.WAITING

        h.connectivity.available = True
        await h.retry_timer.tick()

        assert h.supervisor.phase is ReconnectPhase.RECOVERED
        assert h.state.reconnection_attempts == 0
        assert not h.retry_timer.armed
        assert h.poll_timer.armed
        assert h.poll_timer.interval == 60
        assert h.presenter.intent_kinds == ["cleared"]
        # Guard de reconexao transforma a passada de recuperacao em manual
        assert StatusKind.SYNCING in h.presenter.status_kinds

    @pytest.mark.asyncio
    async def test_exhausted_resumes_polling_and_enables_sync_only(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.connectivity.available = False

        await h.engine.run()
        await h.retry_timer.tick()
        await h.retry_timer.tick()

        assert h.supervisor.phase is ReconnectPhase.EXHAUSTED
        assert h.state.reconnection_attempts == 3
        assert not h.retry_timer.armed
        assert h.poll_timer.armed
        assert h.presenter.affordances[-1] == ((Affordance.SYNC,), True)
        assert h.presenter.status_kinds[-1] is StatusKind.RECONNECT_FAILED
        # Engine + ticks 2 e 3
        assert h.connectivity.probes == 3

    @pytest.mark.asyncio
    async def test_poll_after_exhaustion_resets_attempts(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.connectivity.available = False
        await h.engine.run()
        await h.retry_timer.tick()
        await h.retry_timer.tick()

        h.connectivity.available = True
        await h.poll_timer.tick()

        assert h.state.reconnection_attempts == 0
        assert h.supervisor.phase is ReconnectPhase.EXHAUSTED
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_manual_sync_cancels_reconnection(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.connectivity.available = False
        await h.engine.run()

        h.connectivity.available = True
        await h.engine.run(manual=True)

        assert h.state.reconnection_attempts == 0
        assert h.supervisor.phase is ReconnectPhase.IDLE
        assert not h.retry_timer.armed
        assert h.poll_timer.armed
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_connectivity_error_mid_pass_goes_to_supervisor(self) -> None:
        client = _client_with_unread(1)
        client.errors["get_label"] = ConnectivityError("dns failure")
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert h.presenter.intents == []
        assert h.supervisor.phase is ReconnectPhase.PROBING
        assert h.state.reconnection_attempts == 1
        assert len(h.presenter.sync_times) == 1


class TestFailures:
    @pytest.mark.asyncio
    async def test_remote_error_becomes_error_intent(self) -> None:
        client = _client_with_unread(1)
        client.errors["get_label"] = RemoteApiError("Gmail API get_label failed (500)", 500)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert h.presenter.intents == [ErrorIntent(message="Gmail API get_label failed (500)")]
        assert h.state.reconnection_attempts == 0
        assert h.supervisor.phase is ReconnectPhase.IDLE
        assert len(h.presenter.sync_times) == 1

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_error_intent(self) -> None:
        client = _client_with_unread(1)
        client.errors["get_message"] = ValueError("malformed payload")
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert h.presenter.intents == [ErrorIntent(message="malformed payload")]
        # A contagem nao avanca quando a passada falha
        assert h.state.unread_count is None

    @pytest.mark.asyncio
    async def test_statistics_failure_is_swallowed(self) -> None:
        client = _client_with_unread(2)
        client.errors["get_draft_count"] = StatisticsFetchError("drafts failed", 503)
        h = build_harness(BASE_SETTINGS, client=client)

        await h.engine.run()

        assert h.presenter.intent_kinds == ["unread_many"]
        stats = h.presenter.statistics[-1]
        assert stats.unread_threads == 2
        assert stats.drafts is None
        assert stats.labels is None

    @pytest.mark.asyncio
    async def test_refresh_token_first_refreshes_expired_token(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.auth.expired = True

        await h.engine.run(refresh_token_first=True)

        assert h.auth.refreshes == 1
        assert h.presenter.intent_kinds == ["unread_single"]

    @pytest.mark.asyncio
    async def test_refresh_skipped_when_token_valid(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))

        await h.engine.run(refresh_token_first=True)

        assert h.auth.refreshes == 0

    @pytest.mark.asyncio
    async def test_refresh_failure_surfaces_as_error(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))
        h.auth.expired = True
        h.auth.error = AuthRefreshError("Authentication failed: invalid_grant")

        await h.engine.run(refresh_token_first=True)

        assert h.presenter.intents == [
            ErrorIntent(message="Authentication failed: invalid_grant")
        ]
        assert h.client.calls == []


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_client_created_once_and_account_shown(self) -> None:
        h = build_harness(BASE_SETTINGS, client=_client_with_unread(1))

        await h.engine.run()
        await h.engine.run(manual=True)

        assert len(h.factory_calls) == 1
        assert h.presenter.accounts == ["user@example.com"]
        assert h.state.email_address == "user@example.com"

    @pytest.mark.asyncio
    async def test_apply_settings_takes_effect_next_pass(self) -> None:
        client = _client_with_unread(1)
        client.set_spam(1)
        h = build_harness(BASE_SETTINGS, client=client)

        h.engine.apply_settings(replace(BASE_SETTINGS, spam_notification=False))
        await h.engine.run()

        assert h.engine.settings.spam_notification is False
        assert h.presenter.intent_kinds == ["unread_single"]


class _SlowMailClient(FakeMailClient):
    def __init__(self) -> None:
        super().__init__(messages=[make_message("msg-1")])
        self.set_inbox(1)
        self.active = 0
        self.max_active = 0

    async def get_label(self, name: str):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        await asyncio.sleep(0)
        self.active -= 1
        return await super().get_label(name)


@pytest.mark.asyncio
async def test_concurrent_requests_run_one_at_a_time() -> None:
    client = _SlowMailClient()
    h = build_harness(BASE_SETTINGS, client=client)

    await asyncio.gather(h.engine.run(), h.engine.run())

    assert client.max_active == 1
    assert h.presenter.intent_kinds == ["unread_single"]
    assert not h.engine.in_flight
