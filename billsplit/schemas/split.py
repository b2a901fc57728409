"""Schemas for the result of splitting a bill between tenant and owner."""

from decimal import Decimal

from pydantic import BaseModel


class SplitResult(BaseModel):
    """Tenant/owner breakdown of a bill."""

    model_config = {"frozen": True}

    tenant_total: Decimal
    owner_total: Decimal  # bill total - tenant total; may be negative if ratio > 1
    tenant_kwh: Decimal
    tenant_ratio: Decimal  # tenant kWh / total kWh, RATIO_SCALE digits
    calculation_details: str
