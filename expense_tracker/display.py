"""Presentation helpers shared by the console and the HTTP API."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, NamedTuple, Tuple

from moneyflow.models import Expense
from moneyflow.queries import NO_CATEGORY, Summary

CURRENCY_SYMBOL = "₹"


class CategoryStyle(NamedTuple):
    label: str
    emoji: str
    color: str


CATEGORY_STYLES: Dict[str, CategoryStyle] = {
    "food": CategoryStyle("Food", "🍔", "orange"),
    "travel": CategoryStyle("Travel", "✈️", "blue"),
    "bills": CategoryStyle("Bills", "💡", "red"),
    "entertainment": CategoryStyle("Entertainment", "🎮", "purple"),
    "shopping": CategoryStyle("Shopping", "🛍️", "pink"),
    "health": CategoryStyle("Health", "⚕️", "green"),
    "other": CategoryStyle("Other", "📌", "gray"),
}

_FALLBACK_STYLE = CategoryStyle("Other", "📌", "gray")


def category_style(tag: str) -> CategoryStyle:
    return CATEGORY_STYLES.get(tag, _FALLBACK_STYLE)


def category_label(tag: str) -> str:
    if tag == NO_CATEGORY:
        return "None"
    return category_style(tag).label


def format_amount(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def percentage_of_total(amount: Decimal, total: Decimal) -> Decimal:
    """Share of ``total`` as a percentage with one decimal; zero when there is no total."""
    if not total:
        return Decimal("0.0")
    share = amount / total * 100
    return share.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def category_breakdown(summary: Summary) -> List[Tuple[str, Decimal, Decimal]]:
    """Rows of (category, amount, percentage) ordered by amount, largest first."""
    ranked = sorted(summary.by_category.items(), key=lambda item: item[1], reverse=True)
    return [
        (tag, amount, percentage_of_total(amount, summary.total))
        for tag, amount in ranked
    ]


def format_expense(expense: Expense) -> str:
    style = category_style(expense.category)
    return (
        f"[{expense.id}] {expense.date.isoformat()} {format_amount(expense.amount)}\n"
        f"  Category: {style.emoji} {style.label}\n"
        f"  Note: {expense.note}\n"
    )


def format_summary(summary: Summary) -> str:
    top_name, top_amount = summary.top_category
    lines = [
        f"Total spent: {format_amount(summary.total)} ({summary.count} transactions)",
        f"Average: {format_amount(summary.avg_per_transaction)} per transaction",
        f"Top category: {category_label(top_name)} ({format_amount(top_amount)})",
        f"Active months: {summary.active_months}",
    ]
    breakdown = category_breakdown(summary)
    if breakdown:
        lines.append("By category:")
        for tag, amount, share in breakdown:
            lines.append(f"  {category_label(tag):<14} {format_amount(amount):>12} {share:>6}%")
    if summary.by_month:
        lines.append("By month:")
        for month in sorted(summary.by_month, reverse=True):
            lines.append(f"  {month:<14} {format_amount(summary.by_month[month]):>12}")
    return "\n".join(lines)
