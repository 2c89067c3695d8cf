"""Coupon and discount rule models."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from pricing_engine.core.models.enums import TipoCupom, TipoDesconto


class DiscountRule(BaseModel):
    """Discount applied in one coupon month.

    ``month`` is the 1-based coupon month index, not a calendar month.
    """

    month: int = Field(..., ge=1, description="Coupon month index (1-based)")
    discount_type: TipoDesconto = Field(
        default=TipoDesconto.PERCENTAGE, description="Percentage or fixed amount"
    )
    discount: Decimal = Field(..., ge=0, description="Percent (0-100) or BRL amount")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}


class Coupon(BaseModel):
    """Coupon definition as stored by the admin panel."""

    id: str = Field(..., description="Coupon id")
    code: str = Field(..., description="Code typed at checkout")
    type: TipoCupom = Field(..., description="Coupon type")
    value: Decimal = Field(
        default=Decimal("0"), ge=0, description="Percent or amount (non-progressive)"
    )
    is_active: bool = Field(default=True)
    max_uses: Optional[int] = Field(default=None, ge=0)
    current_uses: int = Field(default=0, ge=0)
    expiration_date: Optional[date] = Field(default=None)
    progressive_discounts: Optional[list[DiscountRule]] = Field(
        default=None, description="Per-month rules for progressive coupons"
    )

    @field_validator("expiration_date", mode="before")
    @classmethod
    def keep_date_part(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10 and v[10] in "T ":
            return v[:10]
        if v == "":
            return None
        return v

    @field_validator("progressive_discounts")
    @classmethod
    def unique_months(cls, v: Optional[list[DiscountRule]]) -> Optional[list[DiscountRule]]:
        """At most one rule per coupon month; rules kept sorted by month."""
        if v is None:
            return v
        months = [rule.month for rule in v]
        duplicados = sorted({m for m in months if months.count(m) > 1})
        if duplicados:
            raise ValueError(f"Mais de uma regra para o(s) mês(es) {duplicados}")
        return sorted(v, key=lambda rule: rule.month)

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}
