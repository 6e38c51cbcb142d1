# src/pm_dashboard/core/errors.py

from __future__ import annotations


class PMDashboardError(Exception):
    """Base class for errors raised by pm_dashboard."""


class ValidationError(PMDashboardError, ValueError):
    """
    User input was rejected (missing field, malformed date, bad amount, ...).

    Raised synchronously before any collection is replaced, so the caller's
    state is never partially updated.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
