"""Validation helpers for candidate expense records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional

from .exceptions import (
    InvalidAmount,
    InvalidCategory,
    InvalidDate,
    MissingDate,
    MissingNote,
    ValidationError,
)
from .models import CATEGORIES, DEFAULT_CATEGORY, ExpenseDraft, parse_date

__all__ = [
    "ValidationResult",
    "parse_amount",
    "validate",
    "validate_category",
    "validate_date",
    "validate_note",
]


def parse_amount(raw: object) -> Decimal:
    """Convert raw input to a positive, finite Decimal kept at its entered precision."""
    if raw is None or isinstance(raw, bool):
        raise InvalidAmount()
    try:
        amount = Decimal(str(raw))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmount() from exc

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount()

    return amount


def validate_date(value: object) -> date:
    if value is None:
        raise MissingDate()
    if isinstance(value, date):
        return parse_date(value)
    if not isinstance(value, str):
        raise InvalidDate()
    if not value.strip():
        raise MissingDate()
    try:
        return parse_date(value)
    except ValueError as exc:
        raise InvalidDate() from exc


def validate_note(value: object) -> str:
    if not isinstance(value, str):
        raise MissingNote()
    trimmed = value.strip()
    if not trimmed:
        raise MissingNote()
    return trimmed


def validate_category(value: object, allowed: Iterable[str] = CATEGORIES) -> str:
    if value is None:
        return DEFAULT_CATEGORY
    if not isinstance(value, str):
        raise InvalidCategory()
    canonical = value.strip().lower()
    if not canonical:
        return DEFAULT_CATEGORY
    allowed = tuple(allowed)
    if canonical not in allowed:
        raise InvalidCategory(f"category must be one of: {', '.join(allowed)}")
    return canonical


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a candidate: either a normalised draft or an error."""

    record: Optional[ExpenseDraft] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ExpenseDraft:
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise ValidationError()
        return self.record


def validate(candidate: Mapping[str, Any]) -> ValidationResult:
    """Check a candidate's fields in form order, stopping at the first failure.

    Amount is checked first, then date, then note, then category. Failures are
    returned rather than raised so callers can surface the message and keep
    the form state.
    """
    try:
        amount = parse_amount(candidate.get("amount"))
        day = validate_date(candidate.get("date"))
        note = validate_note(candidate.get("note"))
        category = validate_category(candidate.get("category"))
    except ValidationError as exc:
        return ValidationResult(error=exc)
    return ValidationResult(
        record=ExpenseDraft(amount=amount, date=day, note=note, category=category)
    )
