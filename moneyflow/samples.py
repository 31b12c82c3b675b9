"""Illustrative expenses used to seed demo sessions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

from .models import ExpenseDraft


def sample_expenses() -> List[ExpenseDraft]:
    return [
        ExpenseDraft(Decimal("450.00"), date(2025, 10, 5), "Grocery shopping at D-Mart", "food"),
        ExpenseDraft(Decimal("1200.00"), date(2025, 10, 4), "Monthly internet bill", "bills"),
        ExpenseDraft(Decimal("350.00"), date(2025, 10, 3), "Movie tickets", "entertainment"),
        ExpenseDraft(Decimal("2500.00"), date(2025, 9, 28), "Flight booking to Goa", "travel"),
        ExpenseDraft(Decimal("899.00"), date(2025, 9, 25), "New headphones", "shopping"),
    ]
