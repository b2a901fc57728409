"""Enum definitions for error classification."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure reported by the numeric core."""

    VALIDATION = "validation"  # Out-of-domain construction input
    INVALID_RANGE = "invalid_range"  # Start date after end date
    INSUFFICIENT_DATA = "insufficient_data"  # Not enough readings to bracket a date
    OUT_OF_RANGE = "out_of_range"  # Target date outside the reading span
    PARSE_FAILURE = "parse_failure"  # Malformed textual reading
