"""Reading value object - a single dated meter-counter sample."""

import re
from datetime import date
from decimal import Decimal
from typing import Self

from pydantic import BaseModel, field_validator

from billsplit.core.exceptions import ReadingParseError

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Plain decimal or exponent notation; no underscores, NaN or Infinity
_VALUE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Reading(BaseModel):
    """Cumulative meter counter value observed on a given day.

    Readings order by date only, so a plain ``sorted()`` gives a time series.
    """

    model_config = {"frozen": True}

    date: date
    value: Decimal

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Decimal) -> Decimal:
        """Validate that the counter value is not negative."""
        if v < 0:
            raise ValueError(f"Consumption cannot be negative. Got: {v}")
        return v

    def __lt__(self, other: "Reading") -> bool:
        if not isinstance(other, Reading):
            return NotImplemented
        return self.date < other.date

    @classmethod
    def parse(cls, raw: str | None) -> Self:
        """Parse a ``YYYY-MM-DD,value`` string (e.g. ``"2023-10-01, 12500"``).

        Raises ReadingParseError for malformed input. A well-formed but negative
        value fails validation like any other constructed Reading.
        """
        if raw is None:
            raise ReadingParseError(raw, "Input string cannot be None")
        if not raw.strip():
            raise ReadingParseError(raw, "Input string cannot be empty or blank")

        chunks = raw.split(",", 1)
        if len(chunks) < 2:
            raise ReadingParseError(raw, "Invalid format. Expected 'YYYY-MM-DD,value'")

        date_text, value_text = (chunk.strip() for chunk in chunks)
        if not _DATE_PATTERN.fullmatch(date_text):
            raise ReadingParseError(raw, f"Invalid date '{date_text}'")
        try:
            reading_date = date.fromisoformat(date_text)
        except ValueError as exc:
            raise ReadingParseError(raw, f"Invalid date '{date_text}'") from exc

        if not _VALUE_PATTERN.fullmatch(value_text):
            raise ReadingParseError(raw, f"Invalid value '{value_text}'")

        return cls(date=reading_date, value=Decimal(value_text))
