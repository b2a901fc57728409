"""Typed errors raised by the interpolation and proration engines."""

from datetime import date
from decimal import Decimal

from billsplit.models.enums import ErrorKind


class BillSplitError(Exception):
    """Base class for all errors raised by billsplit."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRangeError(BillSplitError, ValueError):
    """Raised when a date range ends before it starts."""

    kind = ErrorKind.INVALID_RANGE

    def __init__(self, start: date, end: date) -> None:
        super().__init__(f"Start date ({start}) must be before or equal to end date ({end})")
        self.start = start
        self.end = end


class InsufficientDataError(BillSplitError, ValueError):
    """Raised when too few readings are available to interpolate."""

    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            f"At least {required} readings are required for interpolation, got {available}"
        )
        self.available = available
        self.required = required


class OutOfRangeError(BillSplitError, ValueError):
    """Raised when a target date is not bracketed by the available readings."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, target: date, first_date: date, last_date: date) -> None:
        super().__init__(
            f"Cannot interpolate for date {target}. "
            f"Range available: [{first_date} to {last_date}]"
        )
        self.target = target
        self.first_date = first_date
        self.last_date = last_date


class ReadingParseError(BillSplitError, ValueError):
    """Raised when a textual reading cannot be parsed."""

    kind = ErrorKind.PARSE_FAILURE

    def __init__(self, raw: str | None, reason: str, line_number: int | None = None) -> None:
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Failed to parse reading{location}: {raw!r}. {reason}")
        self.raw = raw
        self.reason = reason
        self.line_number = line_number


class InvalidConsumptionError(BillSplitError, ValueError):
    """Raised when a tenant consumption handed to the splitter is negative."""

    kind = ErrorKind.VALIDATION

    def __init__(self, consumption: Decimal) -> None:
        super().__init__(f"Tenant consumption cannot be negative. Got: {consumption}")
        self.consumption = consumption
