# src/pm_dashboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the date source and id factory,
- wires controllers and the report backend into AppState,
- optionally loads the demo seed data (in memory only; nothing is persisted).
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import get_settings
from ..core.controllers import BudgetController, ProjectsController, ReportsController, TasksController
from ..core.ids import IdFactory, random_id
from ..core.ports import Clock, ReportBackend
from ..core.state import AppState
from ..reports.synthesizer import TemplateReportBackend
from ..seed import demo_budget_items, demo_projects, demo_reports, demo_tasks

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    clock: Clock | None = None,
    id_factory: IdFactory | None = None,
    backend: ReportBackend | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    clock = clock or date.today
    ids = id_factory or random_id
    backend = backend or TemplateReportBackend(latency_ms=settings.report_latency_ms)

    seed = bool(getattr(settings, "seed_demo_data", False))

    state = AppState(
        settings=settings,
        clock=clock,
        projects=ProjectsController(demo_projects() if seed else (), id_factory=ids),
        tasks=TasksController(demo_tasks() if seed else (), id_factory=ids),
        budget=BudgetController(demo_budget_items() if seed else (), id_factory=ids),
        reports=ReportsController(
            demo_reports() if seed else (),
            backend=backend,
            id_factory=ids,
            supersede=bool(getattr(settings, "report_supersede", True)),
        ),
    )
    logger.info(
        "State ready (seed=%s projects=%d tasks=%d budget_items=%d reports=%d)",
        seed,
        len(state.projects.projects),
        len(state.tasks.tasks),
        len(state.budget.items),
        len(state.reports.reports),
    )
    return state
