"""In-memory ownership of expense records."""

from __future__ import annotations

import itertools
import logging
from typing import Iterator, List, Optional

from .models import Expense, ExpenseDraft

logger = logging.getLogger(__name__)


class ExpenseStore:
    """Ordered collection of expenses keyed by a session-unique integer id.

    Records are immutable; updates swap in a new ``Expense`` so nothing outside
    the store can hold a reference that later changes underneath it.
    """

    def __init__(self) -> None:
        self._expenses: List[Expense] = []
        # Ids come from a counter rather than the clock so rapid adds never collide.
        self._ids: Iterator[int] = itertools.count(1)

    # Public API -----------------------------------------------------------
    def add(self, draft: ExpenseDraft) -> int:
        expense = Expense.from_draft(next(self._ids), draft)
        self._expenses.append(expense)
        logger.debug("Added expense %s (%s %s)", expense.id, expense.category, expense.amount)
        return expense.id

    def update(self, expense_id: int, draft: ExpenseDraft) -> bool:
        """Replace the record with ``expense_id``; returns False if there is none."""
        index = self._index_of(expense_id)
        if index is None:
            logger.debug("Update skipped, expense %s not found", expense_id)
            return False
        self._expenses[index] = Expense.from_draft(expense_id, draft)
        logger.debug("Updated expense %s", expense_id)
        return True

    def remove(self, expense_id: int) -> bool:
        """Delete the record with ``expense_id``; callers confirm with the user first."""
        index = self._index_of(expense_id)
        if index is None:
            logger.debug("Remove skipped, expense %s not found", expense_id)
            return False
        del self._expenses[index]
        logger.debug("Removed expense %s", expense_id)
        return True

    def get(self, expense_id: int) -> Optional[Expense]:
        index = self._index_of(expense_id)
        return None if index is None else self._expenses[index]

    def list_all(self) -> List[Expense]:
        return list(self._expenses)

    def clear(self) -> None:
        self._expenses.clear()

    def __len__(self) -> int:
        return len(self._expenses)

    def __contains__(self, expense_id: object) -> bool:
        return any(expense.id == expense_id for expense in self._expenses)

    # Internal helpers -----------------------------------------------------
    def _index_of(self, expense_id: int) -> Optional[int]:
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                return index
        return None
