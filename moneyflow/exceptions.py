"""Domain-specific exceptions for the expense tracker core."""


class ValidationError(ValueError):
    """Raised (or returned) when provided data does not meet validation requirements."""

    code = "validation_error"
    default_message = "Invalid expense data"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidAmount(ValidationError):
    code = "invalid_amount"
    default_message = "Please enter a valid amount greater than 0"


class MissingDate(ValidationError):
    code = "missing_date"
    default_message = "Please select a date"


class InvalidDate(ValidationError):
    code = "invalid_date"
    default_message = "Please enter a valid date (YYYY-MM-DD)"


class MissingNote(ValidationError):
    code = "missing_note"
    default_message = "Please add a note/description"


class InvalidCategory(ValidationError):
    code = "invalid_category"
    default_message = "Please choose one of the listed categories"


class InvalidFilter(ValidationError):
    code = "invalid_filter"
    default_message = "Unsupported filter value"


class RecordNotFoundError(LookupError):
    """Raised when an expense record cannot be located."""
