"""Pytest configuration and fixtures."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from pricing_engine.core.models import (
    CicloCobranca,
    Coupon,
    DiscountRule,
    Plano,
    StatusAssinatura,
    Subscription,
    TipoCupom,
    TipoDesconto,
)


@pytest.fixture
def today() -> date:
    """Fixed reference date for projections."""
    return date(2026, 10, 18)


@pytest.fixture
def progressive_coupon() -> Coupon:
    """Progressive coupon: 50% in month 1, 20% in month 3, nothing else."""
    return Coupon(
        id="cup-prog",
        code="PROMO",
        type=TipoCupom.PROGRESSIVE,
        progressive_discounts=[
            DiscountRule(month=1, discount_type=TipoDesconto.PERCENTAGE, discount=Decimal("50")),
            DiscountRule(month=3, discount_type=TipoDesconto.PERCENTAGE, discount=Decimal("20")),
        ],
    )


@pytest.fixture
def percentage_coupon() -> Coupon:
    """Flat 50% coupon."""
    return Coupon(id="cup-half", code="METADE", type=TipoCupom.PERCENTAGE, value=Decimal("50"))


@pytest.fixture
def fixed_coupon() -> Coupon:
    """Fixed R$ 50 coupon, larger than any monthly price."""
    return Coupon(id="cup-fix", code="BEMVINDO", type=TipoCupom.FIXED, value=Decimal("50"))


@pytest.fixture
def pro_monthly() -> Subscription:
    """Active Pro monthly subscription started in January 2026."""
    return Subscription(
        id="u1",
        nome="Ana",
        plan=Plano.PRO,
        billing_cycle=CicloCobranca.MONTHLY,
        status=StatusAssinatura.ACTIVE,
        start_date=date(2026, 1, 10),
    )


@pytest.fixture
def fleet_data() -> dict:
    """Fleet snapshot in the backend's camelCase layout."""
    return {
        "subscriptions": [
            {
                "id": "u1",
                "nome": "Ana",
                "plan": "pro",
                "billingCycle": "monthly",
                "status": "active",
                "startDate": "2025-06-01T12:00:00.000Z",
            },
            {
                "id": "u2",
                "nome": "Bruno",
                "plan": "family",
                "billingCycle": "monthly",
                "status": "active",
                "startDate": "2026-03-15",
                "couponUsed": "PROMO",
                "couponStartMonth": "2026-10",
            },
            {
                "id": "u3",
                "nome": "Carla",
                "plan": "pro",
                "billingCycle": "annual",
                "status": "canceled",
                "startDate": "2025-01-01",
            },
        ],
        "coupons": [
            {
                "id": "cup-prog",
                "code": "PROMO",
                "type": "progressive",
                "value": 0,
                "progressiveDiscounts": [
                    {"month": 1, "discount": 50, "discountType": "percentage"},
                    {"month": 3, "discount": 20},
                ],
            }
        ],
    }


@pytest.fixture
def fleet_file(tmp_path: Path, fleet_data: dict) -> Path:
    """Fleet snapshot written to a temporary .json file."""
    path = tmp_path / "frota.json"
    path.write_text(json.dumps(fleet_data), encoding="utf-8")
    return path
