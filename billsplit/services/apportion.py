"""Apportion a bill from the tenant's meter readings."""

import logging
from collections.abc import Iterable

from billsplit.models.bill import Bill
from billsplit.models.consumption_series import ConsumptionSeries
from billsplit.models.reading import Reading
from billsplit.schemas.split import SplitResult
from billsplit.services.interpolation import estimate_consumption
from billsplit.services.proration import split_bill

logger = logging.getLogger(__name__)


def apportion_bill(
    bill: Bill,
    readings: ConsumptionSeries | Iterable[Reading],
) -> SplitResult:
    """Estimate the tenant consumption over the bill period and split the bill.

    Interpolation errors (insufficient or out-of-range readings) propagate.
    """
    tenant_kwh = estimate_consumption(bill.period.start, bill.period.end, readings)
    logger.info(
        "Bill %s: tenant consumption %s kWh over %s - %s",
        bill.invoice_number,
        tenant_kwh,
        bill.period.start,
        bill.period.end,
    )
    return split_bill(bill, tenant_kwh)
