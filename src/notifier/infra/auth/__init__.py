"""Sessão OAuth do usuário."""

from notifier.infra.auth.google_session import GoogleAuthSession

__all__ = ["GoogleAuthSession"]
