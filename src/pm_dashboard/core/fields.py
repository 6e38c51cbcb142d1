# src/pm_dashboard/core/fields.py

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from .errors import ValidationError


def require_text(value: Any, field: str) -> str:
    """Return the stripped text or raise ValidationError if it is missing/blank."""
    if value is None or not isinstance(value, str):
        raise ValidationError(field, "is required")
    text = value.strip()
    if not text:
        raise ValidationError(field, "must not be empty")
    return text


def parse_date(value: Any, field: str) -> date:
    """
    Accept a date, a datetime (date part is kept) or an ISO 'YYYY-MM-DD' string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise ValidationError(field, "is required")
        try:
            return date.fromisoformat(raw)
        except ValueError:
            raise ValidationError(field, f"not a valid date: {raw!r} (expected YYYY-MM-DD)") from None
    raise ValidationError(field, "is required")
