# src/pm_dashboard/core/state.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .controllers import BudgetController, ProjectsController, ReportsController, TasksController
from .ports import Clock


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object
    clock: Clock

    projects: ProjectsController
    tasks: TasksController
    budget: BudgetController
    reports: ReportsController

    # Strong refs to fire-and-forget jobs (report generation) so they are not GC'd mid-flight.
    background: set[asyncio.Task[Any]] = field(default_factory=set)

    def today(self) -> date:
        return self.clock()
