"""Superficie de status que registra cada chamada de renderizacao."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.protocols.status_surface import IconKind

if TYPE_CHECKING:
    from notifier.domain.intents import SoundKind
    from notifier.domain.state import Affordance
    from notifier.protocols.status_surface import TipSeverity


class RecordingSurface:
    def __init__(self) -> None:
        self.icon = IconKind.NORMAL
        self.text = ""
        self.tips: list[tuple[str, str, TipSeverity]] = []
        self.sounds: list[SoundKind] = []
        self.menu_enabled: dict[Affordance, bool] = {}
        self.menu_labels: dict[Affordance, str] = {}

    def set_icon(self, kind: IconKind) -> None:
        self.icon = kind

    def set_text(self, text: str) -> None:
        self.text = text

    def show_tip(self, title: str, body: str, severity: TipSeverity) -> None:
        self.tips.append((title, body, severity))

    def set_menu_enabled(self, item: Affordance, enabled: bool) -> None:
        self.menu_enabled[item] = enabled

    def set_menu_label(self, item: Affordance, text: str) -> None:
        self.menu_labels[item] = text

    def play_sound(self, kind: SoundKind) -> None:
        self.sounds.append(kind)
