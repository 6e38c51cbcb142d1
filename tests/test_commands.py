# tests/test_commands.py

from __future__ import annotations

import asyncio

import pytest

from pm_dashboard.cli.commands import CommandRegistry, registry
from pm_dashboard.tasks.task_models import TaskStatus


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/tasks", "/drag", "/drop", "/budget", "/report"):
        assert name in text


def test_task_add_and_board(state) -> None:
    reply = registry.handle(state, "/task add Write docs | Ana Ruiz | 2025-01-20 | in progress")
    assert reply == "Task created: [id-1] Write docs (in-progress)"

    board = registry.handle(state, "/tasks") or ""
    assert "In Progress (3)" in board
    assert "[id-1] Write docs - Ana Ruiz, due 2025-01-20" in board


def test_task_add_validation_message(state) -> None:
    reply = registry.handle(state, "/task add  | Ana | 2025-01-20")
    assert reply == "Invalid title: must not be empty"
    assert len(state.tasks.tasks) == 5


def test_drag_then_drop(state) -> None:
    assert "Dragging task 4" in (registry.handle(state, "/drag 4") or "")
    assert registry.handle(state, "/drop completed") == "Task 4 -> completed"
    assert state.tasks.get("4").status == TaskStatus.COMPLETED

    assert "Nothing is being dragged" in (registry.handle(state, "/drop pending") or "")


def test_drop_on_unknown_column_keeps_gesture(state) -> None:
    registry.handle(state, "/drag 4")
    assert (registry.handle(state, "/drop archive") or "").startswith("Invalid target_status")
    assert state.tasks.dragging == "4"


def test_move_unknown_task_is_noop(state) -> None:
    before = state.tasks.tasks
    assert registry.handle(state, "/move 99 completed") == "Task 99 unchanged."
    assert state.tasks.tasks == before


def test_projects_listing_and_sync(state) -> None:
    listing = registry.handle(state, "/projects") or ""
    assert "[3] Digital marketing campaign - 85% (17/20 tasks) due 2024-12-20 [urgent, 5d]" in listing

    assert registry.handle(state, "/project sync 1") == "Project [1] synced: 1/5 tasks, 20%"
    assert registry.handle(state, "/project sync 42") == "No project with id=42."

    reply = registry.handle(state, "/project add Website | Landing page | 2025-03-01")
    assert reply == "Project created: [id-1] Website"
    assert "Invalid deadline" in (registry.handle(state, "/project add A | B | someday") or "")


def test_budget_commands(state) -> None:
    text = registry.handle(state, "/budget") or ""
    assert "Income:  $55,000" in text
    assert "Expense: $25,500" in text
    assert "Balance: $29,500" in text

    assert (registry.handle(state, "/budget add Licenses | expense | 500 | IT") or "").startswith(
        "Budget item added: [id-1]"
    )
    assert registry.handle(state, "/budget add X | expense | -3 | IT") == (
        "Invalid amount: must be >= 0 (use type=expense for outflows)"
    )
    assert registry.handle(state, "/budget rm id-1") == "Budget item id-1 removed."
    assert registry.handle(state, "/budget rm id-1") == "No budget item with id=id-1."
    assert state.budget.totals().balance == 29500


def test_reports_listing(state) -> None:
    text = registry.handle(state, "/reports") or ""
    assert text.startswith("Reports: 2 total, 0 this month, latest 2024-11-28")

    detail = registry.handle(state, "/reports 1") or ""
    assert "Mobile app redesign (2024-11-28)" in detail
    assert "- Completed: 13" in detail


def test_report_without_event_loop(state) -> None:
    assert "event loop" in (registry.handle(state, "/report") or "")


@pytest.mark.asyncio
async def test_report_command_runs_in_background(state) -> None:
    notes: list[str] = []
    reply = registry.handle(state, "/report Board X", emit=notes.append)
    assert reply == "Generating report for 'Board X'..."

    await asyncio.gather(*list(state.background))

    newest = state.reports.reports[0]
    assert newest.project_name == "Board X"
    assert newest.date.isoformat() == "2024-12-15"
    assert "- In progress: 2" in newest.content
    assert notes == [f"[REPORT] Ready: [{newest.id}] Board X. Use /reports {newest.id} to read it."]
    assert not state.background


@pytest.mark.asyncio
async def test_report_cancel_command(state) -> None:
    notes: list[str] = []
    registry.handle(state, "/report", emit=notes.append)
    await asyncio.sleep(0)

    assert registry.handle(state, "/report cancel") == "Report request cancelled."
    await asyncio.gather(*list(state.background), return_exceptions=True)

    assert notes == ["[REPORT] Request for 'New Project' was cancelled."]
    assert len(state.reports.reports) == 2
    assert registry.handle(state, "/report cancel") == "No report is being generated."
