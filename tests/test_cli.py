"""Tests for the console interface."""

import io
from decimal import Decimal

from expense_tracker.cli import main, run_shell
from moneyflow.services import ExpenseTracker


class TestOneShotCommands:
    def test_list(self, capsys):
        assert main(["list", "--category", "food"]) == 0
        out = capsys.readouterr().out
        assert "Found 1 expenses (total ₹450.00):" in out
        assert "Grocery shopping at D-Mart" in out

    def test_list_empty_session(self, capsys):
        assert main(["--no-samples", "list"]) == 0
        assert "No expenses found." in capsys.readouterr().out

    def test_summary(self, capsys):
        assert main(["summary", "--month", "2025-09"]) == 0
        out = capsys.readouterr().out
        assert "Total spent: ₹3399.00 (2 transactions)" in out
        assert "Top category: Travel (₹2500.00)" in out

    def test_months(self, capsys):
        assert main(["months"]) == 0
        assert capsys.readouterr().out.split() == ["2025-10", "2025-09"]

    def test_invalid_filter_exits_with_error(self, capsys):
        assert main(["list", "--month", "2025/10"]) == 1
        assert "Validation error" in capsys.readouterr().err


class TestShell:
    """Interactive session driven from a text stream."""

    def _run(self, script, tracker=None):
        tracker = tracker or ExpenseTracker()
        run_shell(tracker, io.StringIO(script))
        return tracker

    def test_add_edit_and_list(self, capsys):
        tracker = self._run(
            "add 450 Grocery run --date 2025-10-05\n"
            "edit 1 --amount 500 --category food\n"
            "list\n"
            "quit\n"
        )
        expense = tracker.get_expense(1)
        assert expense.amount == Decimal("500")
        assert expense.note == "Grocery run"
        out = capsys.readouterr().out
        assert "Expense added:" in out
        assert "Expense updated:" in out
        assert "Found 1 expenses (total ₹500.00):" in out

    def test_add_defaults_date_to_today(self):
        from datetime import date

        tracker = self._run("add 20 Tea\n")
        assert tracker.get_expense(1).date == date.today()

    def test_validation_errors_are_reported(self, capsys):
        tracker = self._run("add 0 Nothing\nadd 5 '   '\n")
        assert tracker.list_all() == []
        err = capsys.readouterr().err
        assert "Please enter a valid amount greater than 0" in err
        assert "Please add a note/description" in err

    def test_delete_requires_confirmation(self, capsys):
        tracker = ExpenseTracker()
        tracker.seed_sample_data()
        self._run("delete 1\nn\ndelete 2\ny\n", tracker)
        assert tracker.get_expense(1) is not None
        assert tracker.get_expense(2) is None
        out = capsys.readouterr().out
        assert "Delete cancelled." in out
        assert "Expense 2 deleted." in out

    def test_delete_with_yes_flag(self):
        tracker = ExpenseTracker()
        tracker.seed_sample_data()
        self._run("delete 3 --yes\n", tracker)
        assert len(tracker.list_all()) == 4

    def test_unknown_id(self, capsys):
        self._run("edit 9 --amount 5\ndelete 9 --yes\n")
        assert capsys.readouterr().err.count("Expense 9 not found") == 2

    def test_bad_command_does_not_end_session(self):
        tracker = self._run("frobnicate\nadd 5 Coffee --date 2025-10-01\n")
        assert len(tracker.list_all()) == 1

    def test_quit_stops_reading(self):
        tracker = self._run("quit\nadd 5 Coffee --date 2025-10-01\n")
        assert tracker.list_all() == []

    def test_edit_keeps_exact_amount_when_not_given(self):
        tracker = self._run("add 0.004 Rounding --date 2025-10-01\nedit 1 --note 'Still tiny'\n")
        expense = tracker.get_expense(1)
        assert expense.note == "Still tiny"
        assert expense.amount == Decimal("0.004")
