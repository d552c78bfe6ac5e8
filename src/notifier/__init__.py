"""Inbox notifier — sincronização da caixa de entrada e reconexão.

Camadas:
- domain/: modelos e intenções de notificação
- protocols/: contratos dos colaboradores externos
- services/: SyncEngine, supervisor de reconexão, polling/pausa
- presentation/: tradução das intenções para a superfície de status
- infra/: Gmail API, OAuth, sonda de rede, timers
- bootstrap/: composition root
"""
