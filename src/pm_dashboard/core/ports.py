# src/pm_dashboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controllers depend on Protocols instead of concrete implementations.
This keeps the report backend and the date source swappable and makes
testing easier.
"""

from datetime import date
from typing import Callable, Protocol

from ..tasks.task_models import TaskCounts

Clock = Callable[[], date]
# "What day is it": supplied by the caller so urgency math stays deterministic.


class ReportBackend(Protocol):
    """Turns a counts snapshot into report text; may suspend (remote call, simulated latency)."""

    async def generate(
            self,
            counts: TaskCounts,
            as_of: date,
            *,
            project_name: str | None = None,
    ) -> str: ...
