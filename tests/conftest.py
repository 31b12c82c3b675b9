"""Shared fixtures for the expense tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from api.app import create_app
from moneyflow.models import ExpenseDraft
from moneyflow.services import ExpenseTracker


@pytest.fixture
def tracker():
    return ExpenseTracker()


@pytest.fixture
def seeded_tracker():
    tracker = ExpenseTracker()
    tracker.seed_sample_data()
    return tracker


@pytest.fixture
def make_draft():
    def _make(amount="100.00", day=date(2025, 10, 1), note="Lunch", category="food"):
        return ExpenseDraft(amount=Decimal(amount), date=day, note=note, category=category)

    return _make


@pytest.fixture
def client(seeded_tracker):
    app = create_app(tracker=seeded_tracker)
    app.config["TESTING"] = True
    return app.test_client()
