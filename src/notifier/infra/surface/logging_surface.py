"""Superficie de status headless: renderiza em logs estruturados.

Usada pelo daemon quando nao ha bandeja do sistema. Guarda o ultimo
estado renderizado para consulta (icone, texto, itens de menu).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notifier.domain.state import Affordance
from notifier.protocols.status_surface import IconKind, StatusSurfaceProtocol, TipSeverity

if TYPE_CHECKING:
    from notifier.domain.intents import SoundKind

logger = logging.getLogger(__name__)

_COMPONENT = "status_surface"

_TIP_LEVELS = {
    TipSeverity.INFO: logging.INFO,
    TipSeverity.WARNING: logging.WARNING,
    TipSeverity.ERROR: logging.WARNING,
}


class LoggingStatusSurface(StatusSurfaceProtocol):
    __slots__ = ("icon", "menu_enabled", "menu_labels", "text")

    def __init__(self) -> None:
        self.icon = IconKind.NORMAL
        self.text = ""
        self.menu_enabled: dict[Affordance, bool] = {item: True for item in Affordance}
        self.menu_enabled[Affordance.MARK_AS_READ] = False
        self.menu_labels: dict[Affordance, str] = {}

    def set_icon(self, kind: IconKind) -> None:
        self.icon = kind

    def set_text(self, text: str) -> None:
        self.text = text
        logger.info(
            "status_text_changed",
            extra={"component": _COMPONENT, "icon": self.icon.value, "status": text},
        )

    def show_tip(self, title: str, body: str, severity: TipSeverity) -> None:
        # Conteudo da mensagem fica fora dos logs
        logger.log(
            _TIP_LEVELS[severity],
            "notification_tip_shown",
            extra={"component": _COMPONENT, "severity": severity.value},
        )

    def set_menu_enabled(self, item: Affordance, enabled: bool) -> None:
        self.menu_enabled[item] = enabled

    def set_menu_label(self, item: Affordance, text: str) -> None:
        self.menu_labels[item] = text

    def play_sound(self, kind: SoundKind) -> None:
        logger.debug("sound_requested", extra={"component": _COMPONENT, "sound": kind.value})


__all__ = ["LoggingStatusSurface"]
