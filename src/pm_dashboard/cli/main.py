# src/pm_dashboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL on an
asyncio loop. All state is in memory and is gone when the process exits.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(state: AppState) -> None:
    try:
        await run_console_loop(state)
    finally:
        # No cancellation contract for the caller: drop whatever is still generating.
        jobs = list(state.background)
        for job in jobs:
            job.cancel()
        if jobs:
            await asyncio.gather(*jobs, return_exceptions=True)
            logger.info("Cancelled %d pending report job(s).", len(jobs))


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        asyncio.run(_run(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
