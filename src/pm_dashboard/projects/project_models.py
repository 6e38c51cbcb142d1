# src/pm_dashboard/projects/project_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class Urgency(StrEnum):
    OVERDUE = "overdue"
    URGENT = "urgent"
    ACTIVE = "active"


@dataclass(frozen=True, slots=True)
class Project:
    """
    A project card.

    progress / tasks_completed / total_tasks are a snapshot: they are set at
    creation (all zero) or recomputed from a task board via with_task_counts().
    """

    id: str
    name: str
    description: str
    deadline: date
    progress: int = 0
    tasks_completed: int = 0
    total_tasks: int = 0


@dataclass(frozen=True, slots=True)
class ProjectSummary:
    """Everything a project card renders, derived for a given `today`."""

    project: Project
    progress: int
    tasks_completed: int
    total_tasks: int
    days_remaining: int
    urgency: Urgency
