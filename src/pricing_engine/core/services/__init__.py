"""Pricing, discount and payroll services."""

from pricing_engine.core.services.coupon_resolver import CouponResolver, find_coupon
from pricing_engine.core.services.payroll import (
    PayrollTaxCalculator,
    calculate_net_extra,
    calculate_withholding,
)
from pricing_engine.core.services.projection import (
    ProjectionEngine,
    calculate_mrr,
    price_for_month,
)

__all__ = [
    "CouponResolver",
    "PayrollTaxCalculator",
    "ProjectionEngine",
    "calculate_mrr",
    "calculate_net_extra",
    "calculate_withholding",
    "find_coupon",
    "price_for_month",
]
