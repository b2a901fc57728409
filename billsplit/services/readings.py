"""Bulk parsing of textual readings."""

from collections.abc import Iterable

from billsplit.core.exceptions import ReadingParseError
from billsplit.models.reading import Reading


def parse_readings(lines: Iterable[str]) -> list[Reading]:
    """Parse one ``YYYY-MM-DD,value`` reading per line.

    Blank lines and lines starting with ``#`` are skipped. Parse errors are
    re-raised with the 1-based line number.
    """
    readings: list[Reading] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            readings.append(Reading.parse(stripped))
        except ReadingParseError as exc:
            raise ReadingParseError(exc.raw, exc.reason, line_number=line_number) from exc
    return readings
