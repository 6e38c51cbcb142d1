# src/pm_dashboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..core.errors import ValidationError


class TaskStatus(StrEnum):
    """
    Kanban column a task sits in.

    The machine is flat: a task may be dropped on any column from any column.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: TaskStatus | str | None, field: str = "status") -> TaskStatus:
        """Coerce user/gesture input into a status or raise ValidationError."""
        if isinstance(raw, cls):
            return raw
        if not raw or not isinstance(raw, str):
            raise ValidationError(field, "is required")
        key = raw.strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return cls(key)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(field, f"unknown status {raw!r} (expected one of: {allowed})") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    assignee: str
    due_date: date
    status: TaskStatus = TaskStatus.PENDING


@dataclass(frozen=True, slots=True)
class TaskCounts:
    """Snapshot of how many tasks sit in each column."""

    completed: int = 0
    in_progress: int = 0
    pending: int = 0

    def __post_init__(self) -> None:
        for name in ("completed", "in_progress", "pending"):
            if getattr(self, name) < 0:
                raise ValidationError(name, "count must be >= 0")

    @property
    def total(self) -> int:
        return self.completed + self.in_progress + self.pending
