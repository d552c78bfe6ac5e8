"""Protocolos e contratos dos colaboradores externos do core."""

from .auth_session import AuthSessionProtocol
from .connectivity import ConnectivityGateProtocol
from .mail_client import MailClientProtocol
from .presenter import PresenterProtocol
from .status_surface import IconKind, StatusSurfaceProtocol, TipSeverity
from .timer import TimerProtocol
from .update_gate import UpdateGateProtocol

__all__ = [
    "AuthSessionProtocol",
    "ConnectivityGateProtocol",
    "IconKind",
    "MailClientProtocol",
    "PresenterProtocol",
    "StatusSurfaceProtocol",
    "TimerProtocol",
    "TipSeverity",
    "UpdateGateProtocol",
]
