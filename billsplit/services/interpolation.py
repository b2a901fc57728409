"""Linear interpolation of a meter counter between sparse readings.

The counter value at an unsampled date is estimated from the closest reading at
or before it (floor) and at or after it (ceiling), assuming the counter grows
linearly between the two. The slope keeps SLOPE_SCALE fractional digits; only the
final estimate is rounded to MONEY_SCALE.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from billsplit.core.exceptions import InsufficientDataError, InvalidRangeError, OutOfRangeError
from billsplit.core.rounding import MONEY_SCALE, SLOPE_SCALE, divide, to_scale, wide_context
from billsplit.models.consumption_series import ConsumptionSeries
from billsplit.models.reading import Reading

logger = logging.getLogger(__name__)

# Distinct reading dates needed to estimate consumption over a range
MIN_READINGS = 2


def estimate_value_at(target: date, series: ConsumptionSeries) -> Decimal:
    """Estimate the counter value on target.

    A reading taken exactly on target is returned unmodified, without any
    floor/ceiling search.

    Raises:
        InsufficientDataError: if the series is empty.
        OutOfRangeError: if target is before the first or after the last reading.
    """
    if len(series) == 0:
        raise InsufficientDataError(available=0, required=1)

    exact = series.get(target)
    if exact is not None:
        return exact.value

    floor = series.floor(target)
    ceiling = series.ceiling(target)
    if floor is None or ceiling is None:
        raise OutOfRangeError(target, series.first_date, series.last_date)

    days_total = (ceiling.date - floor.date).days
    days_from_floor = (target - floor.date).days

    with wide_context():
        # slope = (y2 - y1) / (x2 - x1)
        slope = divide(ceiling.value - floor.value, Decimal(days_total), SLOPE_SCALE)
        estimate = floor.value + slope * days_from_floor

    logger.debug(
        "Interpolated %s between %s (%s) and %s (%s): slope=%s estimate=%s",
        target,
        floor.date,
        floor.value,
        ceiling.date,
        ceiling.value,
        slope,
        estimate,
    )
    return to_scale(estimate, MONEY_SCALE)


def estimate_consumption(
    start: date,
    end: date,
    readings: ConsumptionSeries | Iterable[Reading],
) -> Decimal:
    """Estimate the energy consumed between start and end (both inclusive).

    Consumption is the difference of the interpolated counter values at the two
    dates, clamped to zero: out-of-order or noisy readings never produce a
    negative figure.

    Raises:
        InvalidRangeError: if start is after end.
        InsufficientDataError: if fewer than two distinct reading dates are available.
        OutOfRangeError: if either date is outside the reading span.
    """
    if start > end:
        raise InvalidRangeError(start, end)

    series = (
        readings
        if isinstance(readings, ConsumptionSeries)
        else ConsumptionSeries.from_readings(readings)
    )
    if len(series) < MIN_READINGS:
        raise InsufficientDataError(available=len(series), required=MIN_READINGS)

    start_value = estimate_value_at(start, series)
    end_value = estimate_value_at(end, series)
    with wide_context():
        consumption = end_value - start_value

    if consumption < 0:
        logger.warning(
            "Negative consumption %s between %s and %s clamped to zero",
            consumption,
            start,
            end,
        )
        return Decimal("0")
    return consumption
