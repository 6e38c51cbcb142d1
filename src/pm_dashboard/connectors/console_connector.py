# src/pm_dashboard/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

LineReader = Callable[[str], Awaitable[str]]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


async def _read_stdin(prompt: str) -> str:
    """
    Read one line off-loop so pending report jobs keep resolving meanwhile.

    The reader is a daemon thread, not an executor worker: after Ctrl-C the
    thread stays blocked in input(), and interpreter exit must not wait on it.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(result: str | None, exc: BaseException | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(result or "")

    def _worker() -> None:
        try:
            args: tuple[str | None, BaseException | None] = (input(prompt), None)
        except (Exception, KeyboardInterrupt) as e:
            args = (None, e)
        # The loop may already be closed if the console exited meanwhile.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_deliver, *args)

    threading.Thread(target=_worker, name="console-stdin", daemon=True).start()
    return await fut


async def run_console_loop(
    state: AppState,
    *,
    read_line: LineReader = _read_stdin,
    emit: Callable[[str], None] = _print_ts,
) -> None:
    """
    Interactive REPL over AppState.

    Every command runs to completion on the event loop thread, so collection
    writes never interleave. Only /report suspends, as a background job.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "pm-dashboard"))
    logger.info("Console connector started.")
    emit(f"[{app_name}] Use /help for commands. Use /exit to quit.")

    while True:
        try:
            user_input = (await read_line(">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list them."

        emit(response)

    logger.info("Console connector finished.")
