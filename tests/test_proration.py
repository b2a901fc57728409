"""Tests for splitting a bill between tenant and owner."""

import importlib
from decimal import Decimal

import pytest

from billsplit.core import rounding
from billsplit.core.exceptions import InvalidConsumptionError
from billsplit.models.bill import Bill, BillCharges, SocialBonus
from billsplit.models.enums import ErrorKind
from billsplit.services import proration
from billsplit.services.proration import compute_tenant_ratio, split_bill


def _with(bill: Bill, **updates: object) -> Bill:
    """Helper: copy a bill with some fields replaced."""
    return bill.model_copy(update=updates)


class TestComputeTenantRatio:
    """Unit tests for the tenant consumption ratio."""

    def test_ratio_has_six_digits(self) -> None:
        """Test the ratio is rounded half-up to six fractional digits."""
        assert compute_tenant_ratio(Decimal("100"), Decimal("300")) == Decimal("0.333333")
        assert compute_tenant_ratio(Decimal("200"), Decimal("300")) == Decimal("0.666667")

    @pytest.mark.parametrize("tenant_kwh", ["0", "50", "1000"])
    def test_zero_total_gives_zero_ratio(self, tenant_kwh: str) -> None:
        """Test a bill with no consumption gives ratio 0 whatever the tenant used."""
        assert compute_tenant_ratio(Decimal(tenant_kwh), Decimal("0")) == Decimal("0")

    def test_ratio_above_one_accepted(self) -> None:
        """Test a tenant estimate above the bill total is not rejected."""
        assert compute_tenant_ratio(Decimal("450"), Decimal("300")) == Decimal("1.500000")


class TestSplitBill:
    """Unit tests for the bill split."""

    def test_reference_scenario(self, bill: Bill) -> None:
        """Test the 300 kWh / 150.00 bill with a 100 kWh tenant."""
        result = split_bill(bill, Decimal("100"))
        assert result.tenant_ratio == Decimal("0.333333")
        assert result.tenant_total == Decimal("55.00")
        assert result.owner_total == Decimal("95.00")
        assert result.tenant_kwh == Decimal("100")

    def test_calculation_details(self, bill: Bill) -> None:
        """Test the trace summarizes inputs and intermediate shares."""
        result = split_bill(bill, Decimal("100"))
        assert result.calculation_details == (
            "Tenant Consumption: 100.00 kWh (33.33% of Total 300.00 kWh). "
            "Variable Share: 40.00, Fixed Share: 15.00"
        )

    def test_totals_reconcile_with_bill_total(self, bill: Bill) -> None:
        """Test tenant + owner equals the bill total for many consumptions."""
        for tenant_kwh in ("0", "1", "37.77", "99.99", "150", "299.5", "300"):
            result = split_bill(bill, Decimal(tenant_kwh))
            assert result.tenant_total + result.owner_total == bill.total_amount

    def test_fixed_share_is_half_regardless_of_consumption(self, bill: Bill) -> None:
        """Test the tenant always pays half of the fixed costs."""
        no_usage = split_bill(bill, Decimal("0"))
        assert no_usage.tenant_total == Decimal("15.00")
        all_usage = split_bill(bill, Decimal("300"))
        assert all_usage.tenant_total == Decimal("135.00")

    def test_odd_fixed_cost_rounds_half_up(self, bill: Bill, charges: BillCharges) -> None:
        """Test half of an odd-cent fixed cost rounds half-up."""
        transport_fixed = charges.transport_fixed.model_copy(update={"amount": Decimal("20.01")})
        odd = charges.model_copy(update={"transport_fixed": transport_fixed})
        result = split_bill(_with(bill, charges=odd), Decimal("0"))
        assert result.tenant_total == Decimal("15.01")
        assert result.owner_total == Decimal("15.00") + Decimal("120.00")

    def test_personal_charges_go_to_owner(self, bill: Bill, charges: BillCharges) -> None:
        """Test TV tax and social bonus are never split."""
        personal = charges.model_copy(
            update={
                "tv_tax": Decimal("18.00"),
                "social_bonus": SocialBonus(months=2, amount=Decimal("-40.00")),
            }
        )
        result = split_bill(_with(bill, charges=personal), Decimal("100"))
        assert result.tenant_total == Decimal("55.00")
        assert result.owner_total == Decimal("128.00") - Decimal("55.00")

    def test_zero_total_kwh(self, bill: Bill) -> None:
        """Test a zero-consumption bill splits only the fixed costs."""
        result = split_bill(_with(bill, total_kwh=Decimal("0")), Decimal("25"))
        assert result.tenant_ratio == Decimal("0")
        assert result.tenant_total == Decimal("15.00")
        assert result.owner_total == Decimal("135.00")

    def test_tenant_above_total_makes_owner_negative(self, bill: Bill) -> None:
        """Test a ratio above 1 is tolerated and can leave the owner negative."""
        result = split_bill(bill, Decimal("600"))
        assert result.tenant_ratio == Decimal("2.000000")
        assert result.tenant_total == Decimal("255.00")
        assert result.owner_total == Decimal("-105.00")

    def test_negative_consumption_rejected(self, bill: Bill) -> None:
        """Test a negative tenant consumption fails validation."""
        with pytest.raises(InvalidConsumptionError) as exc_info:
            split_bill(bill, Decimal("-1"))
        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert exc_info.value.consumption == Decimal("-1")

    def test_inputs_are_not_mutated(self, bill: Bill) -> None:
        """Test splitting leaves the bill untouched and is deterministic."""
        snapshot = bill.model_dump()
        first = split_bill(bill, Decimal("123.45"))
        second = split_bill(bill, Decimal("123.45"))
        assert bill.model_dump() == snapshot
        assert first == second

    def test_numeric_policy_ignores_environment(
        self, bill: Bill, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the rounding and fixed-split policy cannot be changed from the environment."""
        monkeypatch.setenv("MONEY_SCALE", "0")
        monkeypatch.setenv("RATIO_SCALE", "1")
        monkeypatch.setenv("FIXED_COST_PARTIES", "0")
        importlib.reload(rounding)
        reloaded = importlib.reload(proration)

        result = reloaded.split_bill(bill, Decimal("100"))
        assert result.tenant_ratio == Decimal("0.333333")
        assert result.tenant_total == Decimal("55.00")
        assert reloaded.split_bill(bill, Decimal("0")).tenant_total == Decimal("15.00")
