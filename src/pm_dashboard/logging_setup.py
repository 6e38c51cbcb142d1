# src/pm_dashboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Per-mutation logs ("Task created ...", "/budget rejected ...") that the
# command replies already echo on the console. Kept in the log file.
_ECHOED_BY_REPLIES = (
    "pm_dashboard.tasks",
    "pm_dashboard.projects",
    "pm_dashboard.budget",
    "pm_dashboard.reports",
    "pm_dashboard.core.controllers",
    "pm_dashboard.cli.commands",
)


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the REPL readable between prompts.

    pm_dashboard logs pass, except the collection and command chatter listed
    in _ECHOED_BY_REPLIES, which only reaches the console at WARNING+.
    Python warnings and third-party loggers need ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if _under(name, "pm_dashboard"):
            if record.levelno >= logging.WARNING:
                return True
            return not any(_under(name, p) for p in _ECHOED_BY_REPLIES)

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        # asyncio complains about slow callbacks / unretrieved exceptions; errors only.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/pm_dashboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler: readable + filtered for interactive use
    - File handler: full logs for debugging

    Call this ONCE, very early (before first logger.info).
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "pm_dashboard.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
