# src/pm_dashboard/core/ids.py

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def random_id() -> str:
    """Collision-resistant opaque identifier (no timestamp involved)."""
    return uuid.uuid4().hex


def counter_ids(prefix: str = "", start: int = 1) -> IdFactory:
    """
    Monotonic identifier factory: "<prefix>1", "<prefix>2", ...

    Tests inject it for predictable ids; production uses random_id.
    """
    counter = itertools.count(start)

    def _next() -> str:
        return f"{prefix}{next(counter)}"

    return _next
