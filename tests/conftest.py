# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from pm_dashboard.cli.bootstrap import create_initial_state
from pm_dashboard.core.ids import counter_ids
from pm_dashboard.core.state import AppState
from pm_dashboard.seed import demo_budget_items, demo_tasks

TODAY = date(2024, 12, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="pm-dashboard-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        report_latency_ms=10,
        report_supersede=True,
        default_project_name="New Project",
        seed_demo_data=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with the demo seed, a fixed 'today' and readable ids."""
    return create_initial_state(
        settings=settings,
        clock=lambda: TODAY,
        id_factory=counter_ids("id-"),
    )


@pytest.fixture()
def tasks():
    return demo_tasks()


@pytest.fixture()
def items():
    return demo_budget_items()
