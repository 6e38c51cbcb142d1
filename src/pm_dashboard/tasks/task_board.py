# src/pm_dashboard/tasks/task_board.py

from __future__ import annotations

"""
Kanban status machine.

Every function takes the current task collection by value and returns a new
tuple; nothing here keeps a reference to the caller's collection.

Transitions:
- any status -> any status (manual drag-and-drop, not a workflow engine)
- unknown task id -> collection returned unchanged (stale drag payloads are no-ops)
- unknown target status -> ValidationError (the column set is fixed)
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date

from ..core.fields import parse_date, require_text
from ..core.ids import IdFactory, random_id
from .task_models import Task, TaskCounts, TaskStatus

logger = logging.getLogger(__name__)

COLUMN_TITLES: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


@dataclass(frozen=True, slots=True)
class DragTransfer:
    """Ephemeral slot carrying the dragged task id for the length of one gesture."""

    task_id: str


@dataclass(frozen=True, slots=True)
class Column:
    status: TaskStatus
    title: str
    tasks: tuple[Task, ...]

    @property
    def count(self) -> int:
        return len(self.tasks)


def begin_drag(task_id: str) -> DragTransfer:
    """Start a drag gesture. No task state changes until the drop."""
    return DragTransfer(task_id=str(task_id))


def transition(tasks: Iterable[Task], task_id: str, new_status: TaskStatus | str) -> tuple[Task, ...]:
    """
    Move one task to `new_status`.

    Tasks other than the target are returned as-is (same objects).
    """
    target = TaskStatus.parse(new_status, field="target_status")
    current = tuple(tasks)

    found = False
    out: list[Task] = []
    for task in current:
        if task.id == task_id:
            found = True
            if task.status != target:
                logger.debug("Task %s: %s -> %s", task_id, task.status.value, target.value)
                task = replace(task, status=target)
        out.append(task)

    if not found:
        logger.debug("transition ignored: unknown task_id=%s", task_id)
        return current

    return tuple(out)


def drop_on_column(tasks: Iterable[Task], task_id: str, target_status: TaskStatus | str) -> tuple[Task, ...]:
    """Drop handler: the column identity is the target status."""
    return transition(tasks, task_id, target_status)


def create_task(
    tasks: Iterable[Task],
    title: str,
    assignee: str,
    due_date: date | str,
    initial_status: TaskStatus | str = TaskStatus.PENDING,
    *,
    id_factory: IdFactory = random_id,
) -> tuple[Task, ...]:
    """
    Validate the form fields and append a new task.

    All validation happens before the new collection is built, so a
    ValidationError leaves nothing half-applied.
    """
    clean_title = require_text(title, "title")
    clean_assignee = require_text(assignee, "assignee")
    due = parse_date(due_date, "due_date")
    status = TaskStatus.parse(initial_status)

    task = Task(
        id=id_factory(),
        title=clean_title,
        assignee=clean_assignee,
        due_date=due,
        status=status,
    )
    logger.info("Task created id=%s status=%s", task.id, task.status.value)
    return (*tuple(tasks), task)


def count_by_status(tasks: Iterable[Task]) -> TaskCounts:
    completed = in_progress = pending = 0
    for task in tasks:
        if task.status == TaskStatus.COMPLETED:
            completed += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            in_progress += 1
        else:
            pending += 1
    return TaskCounts(completed=completed, in_progress=in_progress, pending=pending)


def columns(tasks: Iterable[Task]) -> list[Column]:
    """Group tasks into the three board columns, keeping collection order."""
    current = tuple(tasks)
    return [
        Column(
            status=status,
            title=title,
            tasks=tuple(t for t in current if t.status == status),
        )
        for status, title in COLUMN_TITLES.items()
    ]
