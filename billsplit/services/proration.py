"""Split a bill between tenant and owner.

- Variable costs (energy + excise/VAT): proportional to tenant kWh / total kWh.
- Fixed costs (transport fixed + power quota): split equally.
- Personal costs (TV tax, social bonus) and any residual: charged to the owner.
"""

import logging
from decimal import Decimal

from billsplit.core.exceptions import InvalidConsumptionError
from billsplit.core.rounding import MONEY_SCALE, RATIO_SCALE, divide, to_scale, wide_context
from billsplit.models.bill import Bill
from billsplit.schemas.split import SplitResult

logger = logging.getLogger(__name__)


def compute_tenant_ratio(tenant_kwh: Decimal, total_kwh: Decimal) -> Decimal:
    """Tenant share of the total consumption, RATIO_SCALE digits.

    Returns 0 when the bill reports no consumption. A tenant estimate above the
    total is accepted and yields a ratio above 1.
    """
    if total_kwh <= 0:
        return Decimal("0")
    return divide(tenant_kwh, total_kwh, RATIO_SCALE)


def split_bill(bill: Bill, tenant_kwh: Decimal) -> SplitResult:
    """Split the bill costs based on the tenant's consumption.

    Args:
        bill: the full electricity bill
        tenant_kwh: the estimated consumption of the tenant over the bill period

    Raises:
        InvalidConsumptionError: if tenant_kwh is negative.
    """
    if tenant_kwh < 0:
        raise InvalidConsumptionError(tenant_kwh)

    charges = bill.charges

    tenant_ratio = compute_tenant_ratio(tenant_kwh, bill.total_kwh)
    if bill.total_kwh == 0:
        logger.info("Bill %s reports zero kWh; tenant ratio set to 0", bill.invoice_number)

    # Excise and VAT follow consumption together with the energy quota
    variable_cost = charges.energy_variable.amount + charges.excise_and_vat.amount
    with wide_context():
        tenant_variable_share = variable_cost * tenant_ratio

    # Fixed costs are shared equally by tenant and owner
    fixed_cost = charges.transport_fixed.amount + charges.transport_power_quota.amount
    tenant_fixed_share = divide(fixed_cost, Decimal(2), MONEY_SCALE)

    with wide_context():
        tenant_total = to_scale(tenant_variable_share + tenant_fixed_share, MONEY_SCALE)
        owner_total = bill.total_amount - tenant_total

    details = (
        f"Tenant Consumption: {to_scale(tenant_kwh, 2)} kWh "
        f"({to_scale(tenant_ratio * 100, 2)}% of Total {to_scale(bill.total_kwh, 2)} kWh). "
        f"Variable Share: {to_scale(tenant_variable_share, MONEY_SCALE)}, "
        f"Fixed Share: {tenant_fixed_share}"
    )
    logger.debug("Split of bill %s: %s", bill.invoice_number, details)

    return SplitResult(
        tenant_total=tenant_total,
        owner_total=owner_total,
        tenant_kwh=tenant_kwh,
        tenant_ratio=tenant_ratio,
        calculation_details=details,
    )
