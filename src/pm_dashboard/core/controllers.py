# src/pm_dashboard/core/controllers.py

from __future__ import annotations

"""
Collection controllers.

One controller per entity type owns the canonical collection as a tuple and
replaces it wholesale on every write (append-on-create, filter-on-delete,
map-on-update). Readers only ever get the tuple, so no two owners can alias
the same storage. A core function that raises leaves the tuple untouched.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import date

from ..budget import ledger
from ..budget.ledger import BudgetItem, BudgetType, LedgerTotals
from ..projects import project_metrics
from ..projects.project_models import Project, ProjectSummary
from ..reports.report_models import Report, ReportStats
from ..reports.synthesizer import report_stats
from ..tasks import task_board
from ..tasks.task_board import Column, DragTransfer
from ..tasks.task_models import Task, TaskCounts, TaskStatus
from .ids import IdFactory, random_id
from .ports import ReportBackend

logger = logging.getLogger(__name__)


class TasksController:
    """Kanban board owner. Holds at most one in-flight drag gesture."""

    def __init__(self, tasks: Iterable[Task] = (), *, id_factory: IdFactory = random_id) -> None:
        self._tasks: tuple[Task, ...] = tuple(tasks)
        self._id_factory = id_factory
        self._drag: DragTransfer | None = None

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def dragging(self) -> str | None:
        return self._drag.task_id if self._drag else None

    def get(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def create(
        self,
        title: str,
        assignee: str,
        due_date: date | str,
        initial_status: TaskStatus | str = TaskStatus.PENDING,
    ) -> Task:
        self._tasks = task_board.create_task(
            self._tasks, title, assignee, due_date, initial_status, id_factory=self._id_factory
        )
        return self._tasks[-1]

    def begin_drag(self, task_id: str) -> DragTransfer:
        if self._drag is not None:
            logger.debug("Drag of %s replaced by %s", self._drag.task_id, task_id)
        self._drag = task_board.begin_drag(task_id)
        return self._drag

    def cancel_drag(self) -> None:
        self._drag = None

    def drop(self, target_status: TaskStatus | str) -> bool:
        """
        Finish the current gesture on a column. Returns True if a task moved.

        The transfer slot is cleared even when the target column is rejected.
        """
        transfer, self._drag = self._drag, None
        if transfer is None:
            logger.debug("drop without an active drag; ignored")
            return False
        return self.transition(transfer.task_id, target_status)

    def transition(self, task_id: str, new_status: TaskStatus | str) -> bool:
        before = self._tasks
        self._tasks = task_board.transition(before, task_id, new_status)
        return self._tasks != before

    def columns(self) -> list[Column]:
        return task_board.columns(self._tasks)

    def counts(self) -> TaskCounts:
        return task_board.count_by_status(self._tasks)


class ProjectsController:
    def __init__(self, projects: Iterable[Project] = (), *, id_factory: IdFactory = random_id) -> None:
        self._projects: tuple[Project, ...] = tuple(projects)
        self._id_factory = id_factory

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    def get(self, project_id: str) -> Project | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def create(self, name: str, description: str, deadline: date | str) -> Project:
        self._projects = project_metrics.create_project(
            self._projects, name, description, deadline, id_factory=self._id_factory
        )
        return self._projects[-1]

    def sync_counts(self, project_id: str, tasks: Iterable[Task]) -> Project | None:
        """Recompute one project's counters from a task board. Unknown id -> None."""
        board = tuple(tasks)
        updated: Project | None = None
        out: list[Project] = []
        for project in self._projects:
            if project.id == project_id:
                project = updated = project_metrics.with_task_counts(project, board)
            out.append(project)

        if updated is None:
            logger.debug("sync_counts ignored: unknown project_id=%s", project_id)
            return None

        self._projects = tuple(out)
        logger.info(
            "Project %s counts synced: %s/%s (%s%%)",
            project_id,
            updated.tasks_completed,
            updated.total_tasks,
            updated.progress,
        )
        return updated

    def summaries(self, today: date) -> list[ProjectSummary]:
        return [project_metrics.summarize(p, today) for p in self._projects]


class BudgetController:
    def __init__(self, items: Iterable[BudgetItem] = (), *, id_factory: IdFactory = random_id) -> None:
        self._items: tuple[BudgetItem, ...] = tuple(items)
        self._id_factory = id_factory

    @property
    def items(self) -> tuple[BudgetItem, ...]:
        return self._items

    def add(self, concept: str, type: BudgetType | str, amount: object, responsible: str) -> BudgetItem:
        self._items = ledger.add_item(
            self._items, concept, type, amount, responsible, id_factory=self._id_factory
        )
        return self._items[-1]

    def remove(self, item_id: str) -> bool:
        before = self._items
        self._items = ledger.remove_item(before, item_id)
        return len(self._items) != len(before)

    def totals(self) -> LedgerTotals:
        return ledger.totals(self._items)


class ReportsController:
    """
    Report history (newest first) plus the in-flight generation request.

    With supersede=True a new request cancels the pending one; its awaiter
    gets asyncio.CancelledError and no report is recorded for it.
    """

    def __init__(
        self,
        reports: Iterable[Report] = (),
        *,
        backend: ReportBackend,
        id_factory: IdFactory = random_id,
        supersede: bool = True,
    ) -> None:
        self._reports: tuple[Report, ...] = tuple(reports)
        self._backend = backend
        self._id_factory = id_factory
        self.supersede = supersede
        self._pending: asyncio.Task[str] | None = None

    @property
    def reports(self) -> tuple[Report, ...]:
        return self._reports

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def get(self, report_id: str) -> Report | None:
        return next((r for r in self._reports if r.id == report_id), None)

    def cancel_pending(self) -> bool:
        job = self._pending
        if job is None or job.done():
            return False
        job.cancel()
        logger.info("Pending report request cancelled.")
        return True

    async def generate(self, counts: TaskCounts, as_of: date, *, project_name: str) -> Report:
        if self.pending and self.supersede:
            logger.info("Superseding pending report request.")
            self.cancel_pending()

        job = asyncio.ensure_future(self._backend.generate(counts, as_of, project_name=project_name))
        self._pending = job
        try:
            content = await job
        finally:
            if self._pending is job:
                self._pending = None

        report = Report(id=self._id_factory(), project_name=project_name, date=as_of, content=content)
        self._reports = (report, *self._reports)
        logger.info("Report generated id=%s project=%r", report.id, project_name)
        return report

    def stats(self, today: date) -> ReportStats:
        return report_stats(self._reports, today)
