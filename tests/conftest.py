"""Shared fixtures for billsplit tests."""

from datetime import date
from decimal import Decimal

import pytest

from billsplit.models.bill import Bill, BillCharges, BillPeriod, CostComponent
from billsplit.models.reading import Reading


@pytest.fixture
def charges() -> BillCharges:
    """Charges totalling 150.00: 120.00 variable, 30.00 fixed, no TV tax or bonus."""
    return BillCharges(
        energy_variable=CostComponent(amount=Decimal("90.00"), unit_price=Decimal("0.30")),
        transport_fixed=CostComponent(amount=Decimal("20.00")),
        transport_power_quota=CostComponent(amount=Decimal("10.00")),
        excise_and_vat=CostComponent(amount=Decimal("30.00")),
    )


@pytest.fixture
def bill(charges: BillCharges) -> Bill:
    """Bill of 300 kWh for the first bimester of 2023."""
    return Bill(
        invoice_number="2023001589",
        period=BillPeriod(start=date(2023, 1, 1), end=date(2023, 2, 28)),
        total_kwh=Decimal("300"),
        charges=charges,
    )


@pytest.fixture
def readings() -> list[Reading]:
    """Two readings 59 days apart with a 60 kWh increase."""
    return [
        Reading(date=date(2023, 1, 1), value=Decimal("100")),
        Reading(date=date(2023, 3, 1), value=Decimal("160")),
    ]
