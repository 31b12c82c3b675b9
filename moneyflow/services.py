"""Framework-agnostic facade the presentation layers talk to."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .exceptions import RecordNotFoundError, ValidationError
from .models import Expense, ExpenseDraft
from .queries import (
    FilterCriteria,
    Summary,
    distinct_months,
    filter_expenses,
    sort_by_date_descending,
    summarize,
)
from .samples import sample_expenses
from .store import ExpenseStore
from .validators import ValidationResult, validate

logger = logging.getLogger(__name__)


class ExpenseTracker:
    """Owns the session's ExpenseStore and exposes validation, mutation and queries."""

    def __init__(self, store: Optional[ExpenseStore] = None) -> None:
        self._store = store if store is not None else ExpenseStore()
        self.last_error: Optional[ValidationError] = None

    # Validation -----------------------------------------------------------
    def validate(self, candidate: Mapping[str, Any]) -> ValidationResult:
        """Validate a candidate, replacing or clearing the current error state."""
        result = validate(candidate)
        self.last_error = result.error
        return result

    def submit(self, candidate: Mapping[str, Any], expense_id: Optional[int] = None) -> Expense:
        """Validate then add (or replace ``expense_id``), returning the stored record."""
        draft = self.validate(candidate).unwrap()
        if expense_id is None:
            expense_id = self.add_expense(draft)
        elif not self.update_expense(expense_id, draft):
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        return Expense.from_draft(expense_id, draft)

    # Mutations ------------------------------------------------------------
    def add_expense(self, record: ExpenseDraft) -> int:
        return self._store.add(record)

    def update_expense(self, expense_id: int, record: ExpenseDraft) -> bool:
        return self._store.update(expense_id, record)

    def remove_expense(self, expense_id: int) -> bool:
        return self._store.remove(expense_id)

    def seed_sample_data(self) -> None:
        for draft in sample_expenses():
            self._store.add(draft)
        logger.debug("Seeded %d sample expenses", len(self._store))

    # Queries --------------------------------------------------------------
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        return self._store.get(expense_id)

    def list_all(self) -> List[Expense]:
        return self._store.list_all()

    def get_filtered(self, criteria: Optional[FilterCriteria] = None) -> List[Expense]:
        criteria = criteria or FilterCriteria()
        return sort_by_date_descending(filter_expenses(self._store.list_all(), criteria))

    def get_summary(self, criteria: Optional[FilterCriteria] = None) -> Summary:
        criteria = criteria or FilterCriteria()
        return summarize(filter_expenses(self._store.list_all(), criteria))

    def get_month_options(self) -> List[str]:
        return distinct_months(self._store.list_all())
