"""Enumerations for billing and payroll domain models."""

from enum import Enum


class Plano(str, Enum):
    """Subscription plan."""

    STARTER = "starter"
    PRO = "pro"
    FAMILY = "family"


class CicloCobranca(str, Enum):
    """Billing cycle."""

    MONTHLY = "monthly"
    ANNUAL = "annual"


class StatusAssinatura(str, Enum):
    """Subscription status as stored by the billing backend."""

    ACTIVE = "active"
    CANCELED = "canceled"
    PAST_DUE = "past_due"
    PENDING_PAYMENT = "pending_payment"
    REFUNDED = "refunded"
    TRIAL = "trial"


class TipoCupom(str, Enum):
    """Coupon types."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"
    PROGRESSIVE = "progressive"


class TipoDesconto(str, Enum):
    """How a single discount rule changes the price."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class BaseIR(str, Enum):
    """Income tax base used for withholding."""

    LEGAL = "legal"  # gross - INSS - dependents
    SIMPLIFIED = "simplified"  # gross - simplified monthly discount
