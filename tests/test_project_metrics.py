# tests/test_project_metrics.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from pm_dashboard.core.errors import ValidationError
from pm_dashboard.core.ids import counter_ids
from pm_dashboard.projects.project_metrics import (
    classify_urgency,
    compute_progress,
    create_project,
    days_remaining,
    summarize,
    with_task_counts,
)
from pm_dashboard.projects.project_models import Urgency
from pm_dashboard.seed import demo_projects


@pytest.mark.parametrize(
    ("done", "total", "expected"),
    [(0, 0, 0), (13, 20, 65), (20, 20, 100), (0, 5, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13)],
)
def test_compute_progress(done: int, total: int, expected: int) -> None:
    assert compute_progress(done, total) == expected


@pytest.mark.parametrize(
    ("done", "total", "expected"),
    [(3, 2, 100), (-1, 5, 0), (0, -1, 0), (5, -1, 0)],
)
def test_compute_progress_clamps_inconsistent_counts(done: int, total: int, expected: int) -> None:
    assert compute_progress(done, total) == expected


def test_days_remaining_on_calendar_dates() -> None:
    assert days_remaining(date(2025, 1, 15), date(2025, 1, 10)) == 5
    assert days_remaining(date(2025, 1, 15), date(2025, 1, 15)) == 0
    assert days_remaining(date(2024, 12, 20), date(2025, 1, 10)) == -21


def test_days_remaining_rounds_partial_days_up() -> None:
    assert days_remaining(datetime(2025, 1, 15), datetime(2025, 1, 14, 12)) == 1
    assert days_remaining(datetime(2025, 1, 15), datetime(2025, 1, 15, 1)) == 0
    assert days_remaining(datetime(2025, 1, 15), datetime(2025, 1, 16, 12)) == -1
    # A plain-date deadline counts from midnight.
    assert days_remaining(date(2025, 1, 15), datetime(2025, 1, 14, 18)) == 1


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (-100, Urgency.OVERDUE),
        (-1, Urgency.OVERDUE),
        (0, Urgency.URGENT),
        (6, Urgency.URGENT),
        (7, Urgency.ACTIVE),
        (365, Urgency.ACTIVE),
    ],
)
def test_classify_urgency_boundaries(days: int, expected: Urgency) -> None:
    assert classify_urgency(days) == expected


def test_classify_urgency_is_exhaustive_and_exclusive() -> None:
    for d in range(-30, 30):
        u = classify_urgency(d)
        assert (u == Urgency.OVERDUE) == (d < 0)
        assert (u == Urgency.URGENT) == (0 <= d < 7)
        assert (u == Urgency.ACTIVE) == (d >= 7)


def test_create_project_starts_with_zero_counters() -> None:
    existing = demo_projects()
    out = create_project(existing, "Website", "Landing page", "2025-03-01", id_factory=counter_ids("p"))

    assert len(out) == len(existing) + 1
    new = out[-1]
    assert new.id == "p1"
    assert (new.progress, new.tasks_completed, new.total_tasks) == (0, 0, 0)
    assert new.deadline == date(2025, 3, 1)


@pytest.mark.parametrize(
    ("name", "description", "deadline", "field"),
    [
        ("", "d", "2025-03-01", "name"),
        ("n", " ", "2025-03-01", "description"),
        ("n", "d", "03/01/2025", "deadline"),
        ("n", "d", None, "deadline"),
    ],
)
def test_create_project_validation(name, description, deadline, field) -> None:
    existing = demo_projects()
    with pytest.raises(ValidationError) as exc:
        create_project(existing, name, description, deadline)
    assert exc.value.field == field
    assert len(existing) == 3


def test_with_task_counts_derives_from_board(tasks) -> None:
    project = demo_projects()[0]
    synced = with_task_counts(project, tasks)

    assert (synced.tasks_completed, synced.total_tasks, synced.progress) == (1, 5, 20)
    assert project.total_tasks == 20  # original snapshot untouched


def test_with_task_counts_on_empty_board() -> None:
    synced = with_task_counts(demo_projects()[0], ())
    assert (synced.tasks_completed, synced.total_tasks, synced.progress) == (0, 0, 0)


def test_summarize_project_card() -> None:
    mobile, _, marketing = demo_projects()

    s = summarize(marketing, date(2024, 12, 15))
    assert s.days_remaining == 5
    assert s.urgency == Urgency.URGENT
    assert s.progress == 85

    s = summarize(mobile, date(2025, 1, 16))
    assert s.days_remaining == -1
    assert s.urgency == Urgency.OVERDUE
    assert (s.tasks_completed, s.total_tasks) == (13, 20)
