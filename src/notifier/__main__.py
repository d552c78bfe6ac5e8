"""Entry point do daemon: `python -m notifier` ou `inbox-notifier`."""

from __future__ import annotations

import asyncio
import logging

from notifier.bootstrap import build_runtime, initialize_app, validate_runtime_settings

logger = logging.getLogger(__name__)


async def _serve() -> None:
    runtime = build_runtime()
    await runtime.run()


def main() -> None:
    initialize_app()
    validate_runtime_settings()
    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        logger.info("daemon_interrupted", extra={"component": "main"})


if __name__ == "__main__":
    main()
