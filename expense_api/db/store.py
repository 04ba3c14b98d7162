"""In-memory expense store.

Append-only, insertion ordered, no indexing or queries. Each application
instance owns one store (``app.state.store``); nothing survives a process
restart.
"""

from __future__ import annotations

from typing import Iterator, List

from expense_api.models.expense import Expense


class ExpenseStore:
    def __init__(self) -> None:
        self._expenses: List[Expense] = []

    def add(self, expense: Expense) -> Expense:
        self._expenses.append(expense)
        return expense

    def all(self) -> List[Expense]:
        return list(self._expenses)

    def reset(self) -> None:
        """Drop every record (used by tests)."""
        self._expenses.clear()

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(list(self._expenses))
