# src/pm_dashboard/budget/ledger.py

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from ..core.errors import ValidationError
from ..core.fields import require_text
from ..core.ids import IdFactory, random_id

logger = logging.getLogger(__name__)

# "1,500" or "12,000.75"; any other comma placement is not a number.
_GROUPED_RE = re.compile(r"^\d{1,3}(,\d{3})+(\.\d+)?$")


class BudgetType(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, raw: BudgetType | str | None) -> BudgetType:
        if isinstance(raw, cls):
            return raw
        if not raw or not isinstance(raw, str):
            raise ValidationError("type", "is required")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValidationError("type", f"expected 'income' or 'expense', got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class BudgetItem:
    id: str
    concept: str
    type: BudgetType
    amount: Decimal
    responsible: str


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    income: Decimal
    expense: Decimal
    balance: Decimal


def parse_amount(raw: Any) -> Decimal:
    """
    Coerce a form amount into a finite, non-negative Decimal.

    Floats go through str() so 0.1 stays 0.1 rather than its binary expansion.
    Sign is carried by BudgetType, never by the amount.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError("amount", "must be a number")

    try:
        if isinstance(raw, Decimal):
            value = raw
        elif isinstance(raw, int):
            value = Decimal(raw)
        elif isinstance(raw, float):
            value = Decimal(str(raw))
        elif isinstance(raw, str):
            text = raw.strip()
            if not text:
                raise ValidationError("amount", "is required")
            if "," in text:
                if not _GROUPED_RE.match(text):
                    raise ValidationError("amount", f"not a number: {raw!r}")
                text = text.replace(",", "")
            value = Decimal(text)
        else:
            raise ValidationError("amount", "must be a number")
    except InvalidOperation:
        raise ValidationError("amount", f"not a number: {raw!r}") from None

    if not value.is_finite():
        raise ValidationError("amount", "must be finite")
    if value < 0:
        raise ValidationError("amount", "must be >= 0 (use type=expense for outflows)")
    return value


def add_item(
    items: Iterable[BudgetItem],
    concept: str,
    type: BudgetType | str,
    amount: Any,
    responsible: str,
    *,
    id_factory: IdFactory = random_id,
) -> tuple[BudgetItem, ...]:
    clean_concept = require_text(concept, "concept")
    item_type = BudgetType.parse(type)
    value = parse_amount(amount)
    clean_responsible = require_text(responsible, "responsible")

    item = BudgetItem(
        id=id_factory(),
        concept=clean_concept,
        type=item_type,
        amount=value,
        responsible=clean_responsible,
    )
    logger.info("Budget item added id=%s type=%s amount=%s", item.id, item.type.value, item.amount)
    return (*tuple(items), item)


def remove_item(items: Iterable[BudgetItem], item_id: str) -> tuple[BudgetItem, ...]:
    current = tuple(items)
    out = tuple(i for i in current if i.id != item_id)
    if len(out) == len(current):
        logger.debug("remove_item ignored: unknown id=%s", item_id)
    return out


def totals(items: Iterable[BudgetItem]) -> LedgerTotals:
    income = Decimal(0)
    expense = Decimal(0)
    for item in items:
        if item.type == BudgetType.INCOME:
            income += item.amount
        else:
            expense += item.amount
    return LedgerTotals(income=income, expense=expense, balance=income - expense)
