"""Filtering, ordering and summary statistics over expense collections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import InvalidFilter
from .models import CATEGORIES, Expense

__all__ = [
    "ALL",
    "NO_CATEGORY",
    "FilterCriteria",
    "Summary",
    "distinct_months",
    "filter_expenses",
    "sort_by_date_descending",
    "summarize",
]

ALL = "all"
NO_CATEGORY = "none"

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


@dataclass(frozen=True)
class FilterCriteria:
    category: str = ALL
    month: str = ALL

    @classmethod
    def parse(cls, category: Optional[str] = None, month: Optional[str] = None) -> "FilterCriteria":
        """Normalise raw selector values, treating missing or blank ones as ``all``."""
        canonical_category = (category or "").strip().lower() or ALL
        canonical_month = (month or "").strip().lower() or ALL
        if canonical_category != ALL and canonical_category not in CATEGORIES:
            raise InvalidFilter(f"category filter must be 'all' or one of: {', '.join(CATEGORIES)}")
        if canonical_month != ALL and not MONTH_PATTERN.fullmatch(canonical_month):
            raise InvalidFilter("month filter must be 'all' or YYYY-MM")
        return cls(category=canonical_category, month=canonical_month)

    @property
    def is_unfiltered(self) -> bool:
        return self.category == ALL and self.month == ALL

    def matches(self, expense: Expense) -> bool:
        if self.category != ALL and expense.category != self.category:
            return False
        if self.month != ALL and expense.month != self.month:
            return False
        return True


@dataclass(frozen=True)
class Summary:
    total: Decimal = Decimal("0")
    by_category: Dict[str, Decimal] = field(default_factory=dict)
    by_month: Dict[str, Decimal] = field(default_factory=dict)
    count: int = 0
    avg_per_transaction: Decimal = Decimal("0")
    top_category: Tuple[str, Decimal] = (NO_CATEGORY, Decimal("0"))

    @property
    def active_months(self) -> int:
        return len(self.by_month)

    def to_dict(self) -> Dict[str, Any]:
        top_name, top_amount = self.top_category
        return {
            "total": f"{self.total:.2f}",
            "count": self.count,
            "avg_per_transaction": f"{self.avg_per_transaction:.2f}",
            "by_category": {name: f"{amount:.2f}" for name, amount in self.by_category.items()},
            "by_month": {month: f"{amount:.2f}" for month, amount in self.by_month.items()},
            "top_category": {"category": top_name, "amount": f"{top_amount:.2f}"},
            "active_months": self.active_months,
        }


def filter_expenses(expenses: Iterable[Expense], criteria: FilterCriteria) -> List[Expense]:
    return [expense for expense in expenses if criteria.matches(expense)]


def sort_by_date_descending(expenses: Iterable[Expense]) -> List[Expense]:
    # sorted() is stable with reverse=True, so same-day records keep input order.
    return sorted(expenses, key=lambda exp: exp.date, reverse=True)


def summarize(expenses: Iterable[Expense]) -> Summary:
    total = Decimal("0")
    count = 0
    by_category: Dict[str, Decimal] = {}
    by_month: Dict[str, Decimal] = {}

    for expense in expenses:
        total += expense.amount
        count += 1
        by_category[expense.category] = by_category.get(expense.category, Decimal("0")) + expense.amount
        by_month[expense.month] = by_month.get(expense.month, Decimal("0")) + expense.amount

    avg = total / count if count else Decimal("0")

    # Ties keep first-encountered order, so the earliest category wins.
    ranked = sorted(by_category.items(), key=lambda item: item[1], reverse=True)
    top_category = ranked[0] if ranked else (NO_CATEGORY, Decimal("0"))

    return Summary(
        total=total,
        by_category=by_category,
        by_month=by_month,
        count=count,
        avg_per_transaction=avg,
        top_category=top_category,
    )


def distinct_months(expenses: Iterable[Expense]) -> List[str]:
    """Return every ``YYYY-MM`` present, most recent first."""
    return sorted({expense.month for expense in expenses}, reverse=True)
