# src/pm_dashboard/reports/synthesizer.py

from __future__ import annotations

"""
Report synthesis.

The "AI report" is a template renderer over a TaskCounts snapshot. Generation
is modelled as a suspending call (delayed) so a real backend can later sit
behind the same ReportBackend port without changing callers.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import TypeVar

from ..projects.project_metrics import compute_progress
from ..tasks.task_models import TaskCounts
from .report_models import Report, ReportStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _recommendations(counts: TaskCounts) -> list[str]:
    if counts.total == 0:
        return ["No tasks recorded yet. Add tasks to the board to start tracking progress."]

    out: list[str] = []
    if counts.completed == counts.total:
        out.append("All tasks are completed. Prepare the project close-out and final review.")
    if counts.in_progress:
        out.append(f"Follow up on the {counts.in_progress} task(s) in progress before starting new work.")
    if counts.pending:
        out.append(f"Assign owners and dates to the {counts.pending} pending task(s).")
    out.append("Keep stakeholders informed of the current status.")
    return out


def synthesize(counts: TaskCounts, as_of: date, *, project_name: str | None = None) -> str:
    """
    Render the status report for a counts snapshot.

    Pure: the same (counts, as_of, project_name) always yields the same text.
    """
    progress = compute_progress(counts.completed, counts.total)

    lines = [f"# Project Report - {as_of.strftime('%d/%m/%Y')}", ""]
    if project_name:
        lines += [f"Project: {project_name}", ""]

    lines += [
        "## Executive Summary",
        (
            f"The project is at {progress}% completion, with {counts.completed} of "
            f"{counts.total} task(s) completed."
        ),
        "",
        "## Task Status",
        f"- Completed: {counts.completed}",
        f"- In progress: {counts.in_progress}",
        f"- Pending: {counts.pending}",
        "",
        "## Recommendations",
    ]
    lines += [f"- {r}" for r in _recommendations(counts)]
    return "\n".join(lines)


async def delayed(seconds: float, producer: Callable[[], T]) -> T:
    """
    Suspend for at least `seconds` (event-loop clock), then return producer().
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + max(0.0, float(seconds))
    # asyncio may wake a timer up to one clock tick early; never resolve before the deadline.
    while True:
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(remaining)
    return producer()


async def generate_report_async(
    counts: TaskCounts,
    as_of: date,
    simulated_latency_ms: int,
    *,
    project_name: str | None = None,
) -> str:
    """Simulated external report call: synthesize() after the given latency."""
    return await delayed(
        simulated_latency_ms / 1000.0,
        lambda: synthesize(counts, as_of, project_name=project_name),
    )


class TemplateReportBackend:
    """
    Offline deterministic report backend.

    Behavior:
    - waits latency_ms to mimic a remote generator
    - returns synthesize(...) of the snapshot it was given
    """

    def __init__(self, latency_ms: int = 2000) -> None:
        self.latency_ms = max(0, int(latency_ms))

    async def generate(self, counts: TaskCounts, as_of: date, *, project_name: str | None = None) -> str:
        logger.debug("Generating report (latency=%sms counts=%s)", self.latency_ms, counts)
        return await generate_report_async(counts, as_of, self.latency_ms, project_name=project_name)


def report_stats(reports: Sequence[Report] | Iterable[Report], today: date) -> ReportStats:
    """Totals for the report history (newest first)."""
    history = tuple(reports)
    this_month = sum(1 for r in history if r.date.year == today.year and r.date.month == today.month)
    return ReportStats(
        total=len(history),
        this_month=this_month,
        latest_date=history[0].date if history else None,
    )
