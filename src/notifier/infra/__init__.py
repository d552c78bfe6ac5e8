"""Implementações concretas de IO (Gmail, OAuth, rede, timers, superfície)."""
