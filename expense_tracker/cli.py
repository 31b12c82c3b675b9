"""Console interface for the expense tracker."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from datetime import date
from typing import Callable, Iterator, List, Optional, TextIO

from moneyflow.exceptions import RecordNotFoundError, ValidationError
from moneyflow.models import CATEGORIES
from moneyflow.queries import FilterCriteria
from moneyflow.services import ExpenseTracker

from .display import category_style, format_amount, format_expense, format_summary

PROMPT = "moneyflow> "
DELETE_PROMPT = "Are you sure you want to delete this expense?"

Confirm = Callable[[str], bool]


def _criteria(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria.parse(category=args.category, month=args.month)


def handle_list(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    criteria = _criteria(args)
    expenses = tracker.get_filtered(criteria)
    if not expenses:
        print("No expenses found.")
        return
    total = tracker.get_summary(criteria).total
    print(f"Found {len(expenses)} expenses (total {format_amount(total)}):")
    for expense in expenses:
        print(format_expense(expense))


def handle_summary(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    print(format_summary(tracker.get_summary(_criteria(args))))


def handle_months(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    months = tracker.get_month_options()
    if not months:
        print("No months recorded.")
        return
    for month in months:
        print(month)


def handle_categories(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    for tag in CATEGORIES:
        style = category_style(tag)
        print(f"{tag:<14} {style.emoji} {style.label}")


def handle_add(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    candidate = {
        "amount": args.amount,
        "date": args.date or date.today().isoformat(),
        "note": " ".join(args.note),
        "category": args.category,
    }
    expense = tracker.submit(candidate)
    print("Expense added:\n" + format_expense(expense))


def handle_edit(args: argparse.Namespace, tracker: ExpenseTracker) -> None:
    existing = tracker.get_expense(args.id)
    if existing is None:
        raise RecordNotFoundError(f"Expense {args.id} not found")
    changes = {
        "amount": args.amount,
        "date": args.date,
        "note": args.note,
        "category": args.category,
    }
    # Fields left out on the command line keep their current values.
    current = {
        "amount": existing.amount,
        "date": existing.date,
        "note": existing.note,
        "category": existing.category,
    }
    merged = {**current, **{k: v for k, v in changes.items() if v is not None}}
    expense = tracker.submit(merged, expense_id=args.id)
    print("Expense updated:\n" + format_expense(expense))


def handle_delete(args: argparse.Namespace, tracker: ExpenseTracker, confirm: Confirm) -> None:
    if tracker.get_expense(args.id) is None:
        raise RecordNotFoundError(f"Expense {args.id} not found")
    if not args.yes and not confirm(DELETE_PROMPT):
        print("Delete cancelled.")
        return
    tracker.remove_expense(args.id)
    print(f"Expense {args.id} deleted.")


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--category", help="Category tag or 'all'")
    parser.add_argument("--month", help="Month as YYYY-MM or 'all'")


def _add_report_commands(subparsers) -> None:
    list_parser = subparsers.add_parser("list", help="List expenses, most recent first")
    _add_filter_arguments(list_parser)

    summary_parser = subparsers.add_parser("summary", help="Show totals and breakdowns")
    _add_filter_arguments(summary_parser)

    subparsers.add_parser("months", help="List months that have expenses")
    subparsers.add_parser("categories", help="List the available categories")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MoneyFlow personal expense tracker")
    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Start with an empty session instead of the sample expenses",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_report_commands(subparsers)
    subparsers.add_parser("shell", help="Start an interactive session")
    return parser


def build_shell_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_report_commands(subparsers)

    add_parser = subparsers.add_parser("add", help="Add a new expense")
    add_parser.add_argument("amount")
    add_parser.add_argument("note", nargs="+")
    add_parser.add_argument("--date", help="YYYY-MM-DD (default: today)")
    add_parser.add_argument("--category", choices=CATEGORIES)

    edit_parser = subparsers.add_parser("edit", help="Edit an existing expense")
    edit_parser.add_argument("id", type=int)
    edit_parser.add_argument("--amount")
    edit_parser.add_argument("--date")
    edit_parser.add_argument("--note")
    edit_parser.add_argument("--category", choices=CATEGORIES)

    delete_parser = subparsers.add_parser("delete", help="Delete an expense")
    delete_parser.add_argument("id", type=int)
    delete_parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("help", help="Show this help")
    subparsers.add_parser("quit", help="Leave the shell")
    subparsers.add_parser("exit", help="Leave the shell")
    return parser


def dispatch(args: argparse.Namespace, tracker: ExpenseTracker, confirm: Confirm) -> None:
    if args.command == "list":
        handle_list(args, tracker)
    elif args.command == "summary":
        handle_summary(args, tracker)
    elif args.command == "months":
        handle_months(args, tracker)
    elif args.command == "categories":
        handle_categories(args, tracker)
    elif args.command == "add":
        handle_add(args, tracker)
    elif args.command == "edit":
        handle_edit(args, tracker)
    elif args.command == "delete":
        handle_delete(args, tracker, confirm)
    else:  # pragma: no cover - argparse should prevent this
        raise ValueError(f"Unknown command: {args.command}")


def run_shell(tracker: ExpenseTracker, stream: TextIO) -> int:
    """Read commands line by line from ``stream`` until EOF or ``quit``."""
    parser = build_shell_parser()
    lines: Iterator[str] = iter(stream)

    def confirm(prompt: str) -> bool:
        print(f"{prompt} [y/N] ", end="", flush=True)
        answer = next(lines, "")
        return answer.strip().lower() in {"y", "yes"}

    print("MoneyFlow shell. Type 'help' for commands, 'quit' to leave.")
    while True:
        print(PROMPT, end="", flush=True)
        line = next(lines, None)
        if line is None:
            print()
            break
        try:
            tokens = shlex.split(line)
        except ValueError as exc:
            print(f"Could not parse command: {exc}", file=sys.stderr)
            continue
        if not tokens:
            continue
        try:
            args = parser.parse_args(tokens)
        except SystemExit:
            # argparse has already reported the problem.
            continue

        if args.command in {"quit", "exit"}:
            break
        if args.command == "help":
            parser.print_help()
            continue

        try:
            dispatch(args, tracker, confirm)
        except ValidationError as exc:
            print(f"Validation error: {exc}", file=sys.stderr)
        except RecordNotFoundError as exc:
            print(str(exc), file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tracker = ExpenseTracker()
    if not args.no_samples:
        tracker.seed_sample_data()

    if args.command == "shell":
        return run_shell(tracker, sys.stdin)

    try:
        dispatch(args, tracker, confirm=lambda prompt: False)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except RecordNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
