"""Subscription record model."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from pricing_engine.core.models.enums import CicloCobranca, Plano, StatusAssinatura
from pricing_engine.core.models.periods import YearMonth


class Subscription(BaseModel):
    """Subscriber billing snapshot, read-only for the engine.

    Accepts the camelCase keys used by the billing backend
    (``billingCycle``, ``startDate``, ``couponStartMonth``...).
    """

    id: Optional[str] = Field(default=None, description="Subscriber/account id")
    nome: Optional[str] = Field(default=None, description="Subscriber display name")
    plan: Plano = Field(..., description="Subscribed plan")
    billing_cycle: CicloCobranca = Field(
        default=CicloCobranca.MONTHLY, description="Billing cycle"
    )
    status: StatusAssinatura = Field(
        default=StatusAssinatura.ACTIVE, description="Subscription status"
    )
    start_date: Optional[date] = Field(default=None, description="Subscription start")
    account_created_at: Optional[date] = Field(
        default=None, description="Account creation date (start date fallback)"
    )
    coupon_used: Optional[str] = Field(default=None, description="Applied coupon id/code")
    coupon_start_month: Optional[YearMonth] = Field(
        default=None, description="Month the coupon schedule starts (YYYY-MM)"
    )
    first_month_override_price: Optional[Decimal] = Field(
        default=None, ge=0, description="Fixed price replacing month 1"
    )

    @field_validator("start_date", "account_created_at", mode="before")
    @classmethod
    def keep_date_part(cls, v: Any) -> Any:
        """Accept ISO timestamps ("2025-01-15T10:30:00Z") and keep the date."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10 and v[10] in "T ":
            return v[:10]
        if v == "":
            return None
        return v

    @field_validator("coupon_start_month", mode="before")
    @classmethod
    def parse_coupon_start_month(cls, v: Any) -> Any:
        """Parse the YYYY-MM text stored by the backend."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return YearMonth.parse(v)
        return v

    @property
    def is_active(self) -> bool:
        return self.status == StatusAssinatura.ACTIVE

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}
