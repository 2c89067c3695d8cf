"""Price projection result models."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from pricing_engine.core.models.periods import YearMonth
from pricing_engine.core.models.subscription import Subscription


class MonthPrice(BaseModel):
    """Effective price of one subscriber in one calendar month."""

    month: YearMonth = Field(..., description="Calendar month")
    value: Decimal = Field(..., description="Final price (never negative)")
    discount_label: Optional[str] = Field(default=None, description="Applied discount")
    price_unavailable: bool = Field(
        default=False, description="No price table entry for plan/cycle"
    )

    model_config = {"frozen": True}


class ProjectionRow(BaseModel):
    """One month of a subscriber's price trajectory.

    ``value`` is None when the subscriber had not started yet, which is
    different from a free month (``value == 0``).
    """

    month: YearMonth = Field(..., description="Calendar month")
    value: Optional[Decimal] = Field(default=None)
    discount_label: Optional[str] = Field(default=None)
    price_unavailable: bool = Field(default=False)

    @computed_field
    @property
    def month_label(self) -> str:
        return self.month.label

    @property
    def is_applicable(self) -> bool:
        return self.value is not None

    model_config = {"frozen": True}


class SubscriberProjection(BaseModel):
    """Thirteen-month price table of a single subscriber."""

    subscription: Subscription
    rows: list[ProjectionRow] = Field(default_factory=list)

    @property
    def total(self) -> Decimal:
        """Sum of applicable months."""
        return sum((r.value for r in self.rows if r.value is not None), Decimal("0"))

    model_config = {"frozen": True}


class FleetProjection(BaseModel):
    """Thirteen-month revenue table for a set of subscribers."""

    months: list[YearMonth] = Field(default_factory=list)
    subscribers: list[SubscriberProjection] = Field(default_factory=list)
    totals_by_month: list[Decimal] = Field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum(self.totals_by_month, Decimal("0"))

    model_config = {"frozen": True}
