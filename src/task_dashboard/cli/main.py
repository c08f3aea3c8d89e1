# src/task_dashboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the shared HTTP client, builds AppState,
then runs the console dashboard once.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, make_http_client
from ..config import get_settings
from ..dashboard import Pacer, run_dashboard
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    async with make_http_client(settings) as http:
        state = create_initial_state(http, settings=settings)
        await run_dashboard(state, pacer=Pacer(enabled=settings.pacing))


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
