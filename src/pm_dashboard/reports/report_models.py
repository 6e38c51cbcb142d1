# src/pm_dashboard/reports/report_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Report:
    id: str
    project_name: str
    date: date
    content: str


@dataclass(frozen=True, slots=True)
class ReportStats:
    total: int
    this_month: int
    latest_date: date | None
