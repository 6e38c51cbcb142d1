# src/pm_dashboard/seed.py

"""
Demo data loaded at startup when PMD_SEED_DEMO_DATA is on.

Seed ids are short numeric strings; ids minted at runtime are uuid hex, so
the two never collide.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from .budget.ledger import BudgetItem, BudgetType
from .projects.project_models import Project
from .reports.report_models import Report
from .reports.synthesizer import synthesize
from .tasks.task_models import Task, TaskCounts, TaskStatus


def demo_projects() -> tuple[Project, ...]:
    return (
        Project(
            id="1",
            name="Mobile app redesign",
            description="Complete refresh of the user interface",
            deadline=date(2025, 1, 15),
            progress=65,
            tasks_completed=13,
            total_tasks=20,
        ),
        Project(
            id="2",
            name="Inventory management system",
            description="Web platform for stock control",
            deadline=date(2025, 2, 28),
            progress=30,
            tasks_completed=6,
            total_tasks=20,
        ),
        Project(
            id="3",
            name="Digital marketing campaign",
            description="Social media and ads strategy",
            deadline=date(2024, 12, 20),
            progress=85,
            tasks_completed=17,
            total_tasks=20,
        ),
    )


def demo_tasks() -> tuple[Task, ...]:
    return (
        Task("1", "Wireframe design", "Maria Garcia", date(2024, 12, 5), TaskStatus.COMPLETED),
        Task("2", "REST API development", "Carlos Lopez", date(2024, 12, 10), TaskStatus.IN_PROGRESS),
        Task("3", "Database integration", "Ana Martinez", date(2024, 12, 12), TaskStatus.IN_PROGRESS),
        Task("4", "Feature testing", "Pedro Sanchez", date(2024, 12, 15), TaskStatus.PENDING),
        Task("5", "Technical documentation", "Laura Fernandez", date(2024, 12, 18), TaskStatus.PENDING),
    )


def demo_budget_items() -> tuple[BudgetItem, ...]:
    return (
        BudgetItem("1", "Software development", BudgetType.EXPENSE, Decimal(15000), "Carlos Lopez"),
        BudgetItem("2", "UI/UX design", BudgetType.EXPENSE, Decimal(8000), "Maria Garcia"),
        BudgetItem("3", "Client payment - Phase 1", BudgetType.INCOME, Decimal(30000), "Client A"),
        BudgetItem("4", "Cloud infrastructure", BudgetType.EXPENSE, Decimal(2500), "DevOps Team"),
        BudgetItem("5", "Client payment - Phase 2", BudgetType.INCOME, Decimal(25000), "Client A"),
    )


def demo_reports() -> tuple[Report, ...]:
    # Newest first, same order the history is kept in.
    return (
        Report(
            id="1",
            project_name="Mobile app redesign",
            date=date(2024, 11, 28),
            content=synthesize(
                TaskCounts(completed=13, in_progress=5, pending=2),
                date(2024, 11, 28),
                project_name="Mobile app redesign",
            ),
        ),
        Report(
            id="2",
            project_name="Inventory management system",
            date=date(2024, 11, 20),
            content=synthesize(
                TaskCounts(completed=6, in_progress=8, pending=6),
                date(2024, 11, 20),
                project_name="Inventory management system",
            ),
        ),
    )
