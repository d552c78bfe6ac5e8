"""Contrato da superficie de status (icone de bandeja, tips, menu).

A superficie so renderiza; quem decide o que mostrar e o presenter.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from notifier.domain.intents import SoundKind
    from notifier.domain.state import Affordance


class IconKind(StrEnum):
    NORMAL = "normal"
    SYNC = "sync"
    MAILS = "mails"
    STACK = "stack"
    SPAM = "spam"
    RETRY = "retry"
    WARNING = "warning"
    PAUSED = "paused"


class TipSeverity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class StatusSurfaceProtocol(Protocol):
    def set_icon(self, kind: IconKind) -> None: ...

    def set_text(self, text: str) -> None: ...

    def show_tip(self, title: str, body: str, severity: TipSeverity) -> None: ...

    def set_menu_enabled(self, item: Affordance, enabled: bool) -> None: ...

    def set_menu_label(self, item: Affordance, text: str) -> None: ...

    def play_sound(self, kind: SoundKind) -> None: ...
