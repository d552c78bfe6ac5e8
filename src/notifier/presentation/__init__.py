"""Apresentação: tradução das intenções do core para a superfície de status."""

from notifier.presentation.status_presenter import StatusPresenter, sync_time_line

__all__ = ["StatusPresenter", "sync_time_line"]
