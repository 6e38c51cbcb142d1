# tests/test_task_board.py

from __future__ import annotations

from datetime import date
from itertools import product

import pytest

from pm_dashboard.core.errors import ValidationError
from pm_dashboard.core.ids import counter_ids
from pm_dashboard.tasks.task_board import (
    begin_drag,
    columns,
    count_by_status,
    create_task,
    drop_on_column,
    transition,
)
from pm_dashboard.tasks.task_models import TaskStatus


def test_drop_changes_only_the_target_task(tasks) -> None:
    out = drop_on_column(tasks, "4", TaskStatus.COMPLETED)

    assert len(out) == len(tasks)
    assert [t.id for t in out] == [t.id for t in tasks]
    assert out[3].status == TaskStatus.COMPLETED
    assert tasks[3].status == TaskStatus.PENDING  # input untouched
    for i in (0, 1, 2, 4):
        assert out[i] is tasks[i]


def test_double_drop_keeps_ids_and_only_moves_target(tasks) -> None:
    for first, second in product(TaskStatus, repeat=2):
        out = drop_on_column(drop_on_column(tasks, "2", first), "2", second)

        assert len(out) == len(tasks)
        assert [t.id for t in out] == [t.id for t in tasks]
        for before, after in zip(tasks, out):
            if before.id == "2":
                assert after.status == second
                assert after.title == before.title
            else:
                assert after == before


def test_drop_with_unknown_id_is_a_noop(tasks) -> None:
    assert drop_on_column(tasks, "does-not-exist", TaskStatus.COMPLETED) == tasks


def test_drop_on_unknown_column_is_rejected(tasks) -> None:
    with pytest.raises(ValidationError) as exc:
        drop_on_column(tasks, "1", "archived")
    assert exc.value.field == "target_status"


def test_transition_accepts_loose_status_spelling(tasks) -> None:
    out = transition(tasks, "4", "In Progress")
    assert out[3].status == TaskStatus.IN_PROGRESS

    out = transition(out, "4", "in_progress")
    assert out[3].status == TaskStatus.IN_PROGRESS


def test_backwards_transition_is_allowed(tasks) -> None:
    out = transition(tasks, "1", TaskStatus.PENDING)
    assert out[0].status == TaskStatus.PENDING


def test_begin_drag_only_records_the_id() -> None:
    transfer = begin_drag("3")
    assert transfer.task_id == "3"


def test_create_task_appends_with_fresh_id(tasks) -> None:
    out = create_task(tasks, "  Deploy  ", "Ana", "2025-01-01", id_factory=counter_ids("t"))

    assert len(out) == len(tasks) + 1
    new = out[-1]
    assert new.id == "t1"
    assert new.title == "Deploy"
    assert new.due_date == date(2025, 1, 1)
    assert new.status == TaskStatus.PENDING


def test_create_task_with_initial_status(tasks) -> None:
    out = create_task(tasks, "Review", "Luis", date(2025, 1, 2), "completed")
    assert out[-1].status == TaskStatus.COMPLETED


@pytest.mark.parametrize(
    ("title", "assignee", "due", "status", "field"),
    [
        ("", "x", "2025-01-01", "pending", "title"),
        ("   ", "x", "2025-01-01", "pending", "title"),
        ("Task", "", "2025-01-01", "pending", "assignee"),
        ("Task", "x", "", "pending", "due_date"),
        ("Task", "x", "2025-13-01", "pending", "due_date"),
        ("Task", "x", "tomorrow", "pending", "due_date"),
        ("Task", "x", "2025-01-01", "blocked", "status"),
    ],
)
def test_create_task_validation_failure_is_atomic(tasks, title, assignee, due, status, field) -> None:
    ids = counter_ids("t")
    with pytest.raises(ValidationError) as exc:
        create_task(tasks, title, assignee, due, status, id_factory=ids)

    assert exc.value.field == field
    assert len(tasks) == 5
    # No id was minted for the rejected record.
    assert ids() == "t1"


def test_generated_ids_are_unique() -> None:
    board = ()
    for i in range(200):
        board = create_task(board, f"task {i}", "bot", "2025-01-01")
    assert len({t.id for t in board}) == 200


def test_columns_partition_the_board(tasks) -> None:
    cols = columns(tasks)

    assert [c.status for c in cols] == [TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED]
    assert [c.title for c in cols] == ["Pending", "In Progress", "Completed"]
    assert sum(c.count for c in cols) == len(tasks)
    assert [t.id for t in cols[1].tasks] == ["2", "3"]


def test_count_by_status(tasks) -> None:
    counts = count_by_status(tasks)
    assert (counts.completed, counts.in_progress, counts.pending) == (1, 2, 2)
    assert counts.total == 5
