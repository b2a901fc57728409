"""Bill value objects: period, cost components and the bill aggregate."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, field_validator, model_validator


class BillPeriod(BaseModel):
    """Validity range of an invoice, inclusive on both ends."""

    model_config = {"frozen": True}

    start: date
    end: date

    @model_validator(mode="after")
    def validate_order(self) -> "BillPeriod":
        """Validate that the period does not end before it starts."""
        if self.end < self.start:
            raise ValueError(
                f"End date ({self.end}) cannot be before start date ({self.start})"
            )
        return self

    def contains(self, day: date) -> bool:
        """Check whether day falls within the period (start and end included)."""
        return self.start <= day <= self.end


class CostComponent(BaseModel):
    """A single charge of the bill.

    unit_price (e.g. EUR/kWh or EUR/month) is informational only.
    """

    model_config = {"frozen": True}

    amount: Decimal
    unit_price: Decimal | None = None


class SocialBonus(BaseModel):
    """State subsidy credited on the bill, stored as a negative amount."""

    model_config = {"frozen": True}

    months: int
    amount: Decimal

    @field_validator("months")
    @classmethod
    def validate_months(cls, v: int) -> int:
        """Validate that the bonus covers at least one month."""
        if v <= 0:
            raise ValueError(f"Months must be a positive integer. Got: {v}")
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Validate that the bonus is a credit (0 is not a bonus, positive is a charge)."""
        if v >= 0:
            raise ValueError(
                f"Social Bonus amount must be negative (e.g., -50.00) to represent a credit. "
                f"Got: {v}"
            )
        return v


class BillCharges(BaseModel):
    """Breakdown of the bill charges.

    The four cost components are mandatory. TV tax and social bonus appear only
    on some bills and default to None.
    """

    model_config = {"frozen": True}

    energy_variable: CostComponent
    transport_fixed: CostComponent
    transport_power_quota: CostComponent
    excise_and_vat: CostComponent
    tv_tax: Decimal | None = None
    social_bonus: SocialBonus | None = None

    @property
    def total_amount(self) -> Decimal:
        """Sum of all components; the social bonus is negative and reduces the total."""
        total = (
            self.energy_variable.amount
            + self.transport_fixed.amount
            + self.transport_power_quota.amount
            + self.excise_and_vat.amount
        )
        if self.tv_tax is not None:
            total += self.tv_tax
        if self.social_bonus is not None:
            total += self.social_bonus.amount
        return total


class Bill(BaseModel):
    """An electricity bill: invoice metadata, period, consumption and charges."""

    model_config = {"frozen": True}

    invoice_number: str
    period: BillPeriod
    total_kwh: Decimal
    charges: BillCharges

    @field_validator("invoice_number")
    @classmethod
    def validate_invoice_number(cls, v: str) -> str:
        """Validate the invoice number is not blank."""
        if not v or not v.strip():
            raise ValueError("Invoice number cannot be empty or blank")
        return v

    @field_validator("total_kwh")
    @classmethod
    def validate_total_kwh(cls, v: Decimal) -> Decimal:
        """Validate total consumption is not negative."""
        if v < 0:
            raise ValueError(f"Total kWh cannot be negative. Got: {v}")
        return v

    @property
    def total_amount(self) -> Decimal:
        """Total amount to pay."""
        return self.charges.total_amount
