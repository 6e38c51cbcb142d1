# src/pm_dashboard/projects/project_metrics.py

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime, time

from ..core.fields import parse_date, require_text
from ..core.ids import IdFactory, random_id
from ..tasks.task_board import count_by_status
from ..tasks.task_models import Task
from .project_models import Project, ProjectSummary, Urgency

logger = logging.getLogger(__name__)

URGENT_WINDOW_DAYS = 7
_SECONDS_PER_DAY = 86_400


def compute_progress(tasks_completed: int, total_tasks: int) -> int:
    """
    Integer completion percentage, rounded half-up.

    0 when there are no tasks. Always within 0..100: negative counts are
    treated as 0 and completed is capped at total.
    """
    total = max(total_tasks, 0)
    done = min(max(tasks_completed, 0), total)
    if total == 0:
        return 0
    # round(c / t * 100) with half-up rounding, done in integers to avoid float drift.
    return (200 * done + total) // (2 * total)


def _as_datetime(value: date, like: date) -> datetime:
    if isinstance(value, datetime):
        return value
    tz = like.tzinfo if isinstance(like, datetime) else None
    return datetime.combine(value, time.min, tzinfo=tz)


def days_remaining(deadline: date, today: date) -> int:
    """
    Whole days until `deadline`, rounded up; negative once it has passed.

    Plain dates give the exact calendar difference. If either side is a
    datetime, the fractional day count is ceiled.
    """
    if not isinstance(deadline, datetime) and not isinstance(today, datetime):
        return (deadline - today).days

    end = _as_datetime(deadline, today)
    start = _as_datetime(today, deadline)
    return math.ceil((end - start).total_seconds() / _SECONDS_PER_DAY)


def classify_urgency(days: int) -> Urgency:
    if days < 0:
        return Urgency.OVERDUE
    if days < URGENT_WINDOW_DAYS:
        return Urgency.URGENT
    return Urgency.ACTIVE


def create_project(
    projects: Iterable[Project],
    name: str,
    description: str,
    deadline: date | str,
    *,
    id_factory: IdFactory = random_id,
) -> tuple[Project, ...]:
    """Validate the form and append a project with all counters at zero."""
    clean_name = require_text(name, "name")
    clean_description = require_text(description, "description")
    due = parse_date(deadline, "deadline")

    project = Project(
        id=id_factory(),
        name=clean_name,
        description=clean_description,
        deadline=due,
    )
    logger.info("Project created id=%s deadline=%s", project.id, project.deadline.isoformat())
    return (*tuple(projects), project)


def with_task_counts(project: Project, tasks: Iterable[Task]) -> Project:
    """Recompute the project's counters from a task board."""
    counts = count_by_status(tasks)
    return replace(
        project,
        tasks_completed=counts.completed,
        total_tasks=counts.total,
        progress=compute_progress(counts.completed, counts.total),
    )


def summarize(project: Project, today: date) -> ProjectSummary:
    days = days_remaining(project.deadline, today)
    return ProjectSummary(
        project=project,
        progress=compute_progress(project.tasks_completed, project.total_tasks),
        tasks_completed=project.tasks_completed,
        total_tasks=project.total_tasks,
        days_remaining=days,
        urgency=classify_urgency(days),
    )
