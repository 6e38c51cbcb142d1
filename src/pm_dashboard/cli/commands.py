# src/pm_dashboard/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from decimal import Decimal
from typing import cast

from ..budget.ledger import BudgetType
from ..core.errors import ValidationError
from ..core.state import AppState
from ..tasks.task_models import TaskStatus

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        ValidationError from a handler becomes a user-facing message; the
        collections are unchanged in that case.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            logger.debug("/%s rejected: %s", name, e)
            return f"Invalid {e.field}: {e.message}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _fields(args: list[str]) -> list[str]:
    """Split "a b | c | d" form input into stripped pipe-separated fields."""
    raw = " ".join(args)
    if not raw.strip():
        return []
    return [f.strip() for f in raw.split("|")]


def _money(value: Decimal) -> str:
    return f"${value:,}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.settings
    pending = "yes" if state.reports.pending else "no"
    return (
        "Status:\n"
        f"  Today: {state.today().isoformat()}\n"
        f"  Projects: {len(state.projects.projects)}\n"
        f"  Tasks: {len(state.tasks.tasks)}\n"
        f"  Budget items: {len(state.budget.items)}\n"
        f"  Reports: {len(state.reports.reports)} (generating: {pending})\n"
        f"  Report latency: {getattr(s, 'report_latency_ms', '?')} ms"
    )


def cmd_projects(state: AppState, args: list[str]) -> str:
    summaries = state.projects.summaries(state.today())
    if not summaries:
        return "No projects yet. Use /project add <name> | <description> | <YYYY-MM-DD>."
    lines = ["Projects:"]
    for s in summaries:
        p = s.project
        lines.append(
            f"  [{p.id}] {p.name} - {s.progress}% "
            f"({s.tasks_completed}/{s.total_tasks} tasks) "
            f"due {p.deadline.isoformat()} [{s.urgency.value}, {s.days_remaining}d]"
        )
    return "\n".join(lines)


def cmd_project(state: AppState, args: list[str]) -> str:
    """
    /project add <name> | <description> | <YYYY-MM-DD>
    /project sync <id>   -> recompute counters from the task board
    """
    usage = "Usage: /project add <name> | <description> | <YYYY-MM-DD>  or  /project sync <id>"
    if not args:
        return usage

    sub = args[0].lower()

    if sub == "add":
        fields = _fields(args[1:])
        if len(fields) != 3:
            return usage
        project = state.projects.create(*fields)
        return f"Project created: [{project.id}] {project.name}"

    if sub == "sync":
        if len(args) != 2:
            return usage
        updated = state.projects.sync_counts(args[1], state.tasks.tasks)
        if updated is None:
            return f"No project with id={args[1]}."
        return (
            f"Project [{updated.id}] synced: {updated.tasks_completed}/{updated.total_tasks} "
            f"tasks, {updated.progress}%"
        )

    return usage


def cmd_tasks(state: AppState, args: list[str]) -> str:
    lines = ["Board:"]
    for col in state.tasks.columns():
        lines.append(f"  {col.title} ({col.count})")
        for t in col.tasks:
            lines.append(f"    [{t.id}] {t.title} - {t.assignee}, due {t.due_date.isoformat()}")
    dragging = state.tasks.dragging
    if dragging:
        lines.append(f"  (dragging task {dragging})")
    return "\n".join(lines)


def cmd_task(state: AppState, args: list[str]) -> str:
    """/task add <title> | <assignee> | <YYYY-MM-DD> [| <status>]"""
    usage = "Usage: /task add <title> | <assignee> | <YYYY-MM-DD> [| <status>]"
    if not args or args[0].lower() != "add":
        return usage
    fields = _fields(args[1:])
    if len(fields) not in (3, 4):
        return usage
    task = state.tasks.create(*fields)
    return f"Task created: [{task.id}] {task.title} ({task.status.value})"


def cmd_drag(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /drag <task_id>"
    state.tasks.begin_drag(args[0])
    return f"Dragging task {args[0]}. Use /drop <status> to place it."


def cmd_drop(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /drop <pending|in-progress|completed>"
    task_id = state.tasks.dragging
    if task_id is None:
        return "Nothing is being dragged. Use /drag <task_id> first."
    target = TaskStatus.parse(" ".join(args), field="target_status")
    if state.tasks.drop(target):
        return f"Task {task_id} -> {target.value}"
    return f"Task {task_id} unchanged."


def cmd_move(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /move <task_id> <pending|in-progress|completed>"
    task_id = args[0]
    target = TaskStatus.parse(" ".join(args[1:]), field="target_status")
    if state.tasks.transition(task_id, target):
        return f"Task {task_id} -> {target.value}"
    return f"Task {task_id} unchanged."


def cmd_budget(state: AppState, args: list[str]) -> str:
    """
    /budget                                                     -> ledger + totals
    /budget add <concept> | <income|expense> | <amount> | <responsible>
    /budget rm <id>
    """
    if args:
        sub = args[0].lower()
        if sub == "add":
            fields = _fields(args[1:])
            if len(fields) != 4:
                return "Usage: /budget add <concept> | <income|expense> | <amount> | <responsible>"
            item = state.budget.add(*fields)
            return f"Budget item added: [{item.id}] {item.concept} {_money(item.amount)}"
        if sub in ("rm", "remove", "del"):
            if len(args) != 2:
                return "Usage: /budget rm <id>"
            if state.budget.remove(args[1]):
                return f"Budget item {args[1]} removed."
            return f"No budget item with id={args[1]}."
        return "Usage: /budget | /budget add ... | /budget rm <id>"

    totals = state.budget.totals()
    lines = ["Budget:"]
    for item in state.budget.items:
        sign = "+" if item.type == BudgetType.INCOME else "-"
        lines.append(f"  [{item.id}] {sign}{_money(item.amount)} {item.concept} ({item.responsible})")
    lines += [
        f"  Income:  {_money(totals.income)}",
        f"  Expense: {_money(totals.expense)}",
        f"  Balance: {_money(totals.balance)}",
    ]
    return "\n".join(lines)


def cmd_report(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /report [project name]  -> generate a report from the current board (async)
    /report cancel          -> cancel the pending request
    """
    if args and args[0].lower() == "cancel" and len(args) == 1:
        return "Report request cancelled." if state.reports.cancel_pending() else "No report is being generated."

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return "Report generation needs the console event loop."

    default_name = str(getattr(state.settings, "default_project_name", "New Project"))
    project_name = " ".join(args).strip() or default_name
    counts = state.tasks.counts()
    superseding = state.reports.pending and state.reports.supersede

    job = loop.create_task(state.reports.generate(counts, state.today(), project_name=project_name))
    state.background.add(job)

    def _done(t: asyncio.Task) -> None:
        state.background.discard(t)
        if t.cancelled():
            msg = f"[REPORT] Request for {project_name!r} was cancelled."
        elif t.exception() is not None:
            logger.error("Report generation failed", exc_info=t.exception())
            msg = f"[REPORT] Generation failed for {project_name!r}."
        else:
            report = t.result()
            msg = f"[REPORT] Ready: [{report.id}] {report.project_name}. Use /reports {report.id} to read it."
        if emit:
            with contextlib.suppress(Exception):
                emit(msg)

    job.add_done_callback(_done)

    note = " (previous request superseded)" if superseding else ""
    return f"Generating report for {project_name!r}...{note}"


def cmd_reports(state: AppState, args: list[str]) -> str:
    if args:
        report = state.reports.get(args[0])
        if report is None:
            return f"No report with id={args[0]}."
        return f"{report.project_name} ({report.date.isoformat()})\n\n{report.content}"

    stats = state.reports.stats(state.today())
    latest = stats.latest_date.isoformat() if stats.latest_date else "N/A"
    lines = [f"Reports: {stats.total} total, {stats.this_month} this month, latest {latest}"]
    for r in state.reports.reports:
        lines.append(f"  [{r.id}] {r.project_name} - {r.date.isoformat()}")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show collection sizes and report state.")
registry.register("projects", cmd_projects, help_text="List projects with progress and urgency.")
registry.register("project", cmd_project, help_text="/project add <name> | <desc> | <date>  |  /project sync <id>.")
registry.register("tasks", cmd_tasks, help_text="Show the kanban board.", aliases=["board"])
registry.register("task", cmd_task, help_text="/task add <title> | <assignee> | <date> [| <status>].")
registry.register("drag", cmd_drag, help_text="Pick up a task: /drag <task_id>.")
registry.register("drop", cmd_drop, help_text="Drop the dragged task on a column: /drop <status>.")
registry.register("move", cmd_move, help_text="Move a task directly: /move <task_id> <status>.")
registry.register("budget", cmd_budget, help_text="Ledger: /budget | /budget add ... | /budget rm <id>.")
registry.register("report", cmd_report, help_text="Generate a report: /report [project name] | /report cancel.")
registry.register("reports", cmd_reports, help_text="Report history: /reports [id].")
