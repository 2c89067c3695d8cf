"""Domain models for subscription pricing and payroll."""

from pricing_engine.core.models.enums import (
    BaseIR,
    CicloCobranca,
    Plano,
    StatusAssinatura,
    TipoCupom,
    TipoDesconto,
)
from pricing_engine.core.models.periods import YearMonth
from pricing_engine.core.models.subscription import Subscription
from pricing_engine.core.models.coupon import Coupon, DiscountRule
from pricing_engine.core.models.projection import (
    FleetProjection,
    MonthPrice,
    ProjectionRow,
    SubscriberProjection,
)
from pricing_engine.core.models.payroll import (
    ExtraIncomeResult,
    PayrollResult,
    TaxBaseResult,
)
from pricing_engine.core.models.payment import CreditCardInput

__all__ = [
    "BaseIR",
    "CicloCobranca",
    "Plano",
    "StatusAssinatura",
    "TipoCupom",
    "TipoDesconto",
    "YearMonth",
    "Subscription",
    "Coupon",
    "DiscountRule",
    "FleetProjection",
    "MonthPrice",
    "ProjectionRow",
    "SubscriberProjection",
    "ExtraIncomeResult",
    "PayrollResult",
    "TaxBaseResult",
    "CreditCardInput",
]
