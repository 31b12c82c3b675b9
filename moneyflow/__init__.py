"""Core business logic package for the expense tracker."""

from .exceptions import (
    InvalidAmount,
    InvalidCategory,
    InvalidDate,
    InvalidFilter,
    MissingDate,
    MissingNote,
    RecordNotFoundError,
    ValidationError,
)
from .models import CATEGORIES, DEFAULT_CATEGORY, Expense, ExpenseDraft
from .queries import (
    FilterCriteria,
    Summary,
    distinct_months,
    filter_expenses,
    sort_by_date_descending,
    summarize,
)
from .services import ExpenseTracker
from .store import ExpenseStore
from .validators import ValidationResult, validate

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "Expense",
    "ExpenseDraft",
    "ExpenseStore",
    "ExpenseTracker",
    "FilterCriteria",
    "Summary",
    "ValidationResult",
    "distinct_months",
    "filter_expenses",
    "sort_by_date_descending",
    "summarize",
    "validate",
    "InvalidAmount",
    "InvalidCategory",
    "InvalidDate",
    "InvalidFilter",
    "MissingDate",
    "MissingNote",
    "RecordNotFoundError",
    "ValidationError",
]
