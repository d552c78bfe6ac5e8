"""Superfícies de status."""

from notifier.infra.surface.logging_surface import LoggingStatusSurface

__all__ = ["LoggingStatusSurface"]
