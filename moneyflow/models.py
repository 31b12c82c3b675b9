"""Data models for the expense tracker domain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Union

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "DATE_FORMAT",
    "Expense",
    "ExpenseDraft",
    "month_key",
    "parse_date",
]

CATEGORIES = (
    "food",
    "travel",
    "bills",
    "entertainment",
    "shopping",
    "health",
    "other",
)

DEFAULT_CATEGORY = "food"

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Union[str, date]) -> date:
    """Parse a ``YYYY-MM-DD`` string into a date; dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` bucket a date falls into."""
    return day.strftime("%Y-%m")


@dataclass(frozen=True)
class ExpenseDraft:
    """A validated expense that has not been assigned an id yet."""

    amount: Decimal
    date: date
    note: str
    category: str


@dataclass(frozen=True)
class Expense:
    id: int
    amount: Decimal
    date: date
    note: str
    category: str

    @property
    def month(self) -> str:
        return month_key(self.date)

    @classmethod
    def from_draft(cls, expense_id: int, draft: ExpenseDraft) -> "Expense":
        return cls(
            id=expense_id,
            amount=draft.amount,
            date=draft.date,
            note=draft.note,
            category=draft.category,
        )

    def to_draft(self) -> ExpenseDraft:
        return ExpenseDraft(
            amount=self.amount, date=self.date, note=self.note, category=self.category
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the expense to JSON-friendly natives."""
        return {
            "id": self.id,
            "amount": f"{self.amount:.2f}",
            "date": self.date.isoformat(),
            "note": self.note,
            "category": self.category,
        }
