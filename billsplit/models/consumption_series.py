"""ConsumptionSeries - an ordered, date-unique index over readings."""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from datetime import date
from operator import attrgetter
from typing import Self

from pydantic import BaseModel, field_validator

from billsplit.models.reading import Reading

_by_date = attrgetter("date")


class ConsumptionSeries(BaseModel):
    """Readings sorted ascending by date, at most one per date.

    Built fresh for each computation. When several readings share a date the
    last one supplied wins.
    """

    model_config = {"frozen": True}

    readings: tuple[Reading, ...]

    @field_validator("readings")
    @classmethod
    def normalize_readings(cls, v: tuple[Reading, ...]) -> tuple[Reading, ...]:
        """Sort readings by date and keep the last reading for each date."""
        unique = {reading.date: reading for reading in v}
        return tuple(sorted(unique.values(), key=_by_date))

    @classmethod
    def from_readings(cls, readings: Iterable[Reading]) -> Self:
        """Build a series from any iterable of readings."""
        return cls(readings=tuple(readings))

    def __len__(self) -> int:
        return len(self.readings)

    @property
    def first_date(self) -> date:
        """Date of the earliest reading."""
        return self.readings[0].date

    @property
    def last_date(self) -> date:
        """Date of the latest reading."""
        return self.readings[-1].date

    def get(self, target: date) -> Reading | None:
        """Return the reading taken exactly on target, if any."""
        index = bisect_left(self.readings, target, key=_by_date)
        if index < len(self.readings) and self.readings[index].date == target:
            return self.readings[index]
        return None

    def floor(self, target: date) -> Reading | None:
        """Return the latest reading at or before target."""
        index = bisect_right(self.readings, target, key=_by_date)
        return self.readings[index - 1] if index > 0 else None

    def ceiling(self, target: date) -> Reading | None:
        """Return the earliest reading at or after target."""
        index = bisect_left(self.readings, target, key=_by_date)
        return self.readings[index] if index < len(self.readings) else None
