"""Coupon rule resolution.

A coupon month index is the 1-based count of billing periods a coupon has
been running for a subscriber. Progressive coupons carry one rule per
month index; percentage and fixed coupons apply the same rule to every
positive index.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from loguru import logger

from pricing_engine.core.models.coupon import Coupon, DiscountRule
from pricing_engine.core.models.enums import TipoCupom, TipoDesconto
from pricing_engine.shared.formatters import format_currency, format_percentage

ZERO = Decimal("0")
CEM = Decimal("100")


class CouponResolver:
    """Resolves which discount rule a coupon grants in a given coupon month."""

    def resolve(self, coupon: Coupon, coupon_month_index: int) -> Optional[DiscountRule]:
        """Return the rule for ``coupon_month_index`` or None.

        Non-positive indexes mean the coupon is not active yet. Progressive
        coupons only match an explicit rule for that month; a month without
        a rule is charged full price.
        """
        if coupon_month_index < 1:
            return None

        if coupon.type == TipoCupom.PROGRESSIVE:
            if not coupon.progressive_discounts:
                logger.debug(
                    "Cupom progressivo {} sem regras; sem desconto", coupon.code
                )
                return None
            for rule in coupon.progressive_discounts:
                if rule.month == coupon_month_index:
                    return rule
            return None

        discount_type = (
            TipoDesconto.FIXED if coupon.type == TipoCupom.FIXED else TipoDesconto.PERCENTAGE
        )
        return DiscountRule(
            month=coupon_month_index,
            discount_type=discount_type,
            discount=coupon.value,
        )

    @staticmethod
    def apply_discount(price: Decimal, rule: DiscountRule) -> Decimal:
        """Apply a rule to a price, never going below zero."""
        if rule.discount_type == TipoDesconto.FIXED:
            discounted = price - rule.discount
        else:
            discounted = price * (1 - rule.discount / CEM)
        return max(discounted, ZERO)

    @staticmethod
    def describe_rule(coupon: Coupon, rule: DiscountRule) -> str:
        """Build the label shown next to a discounted month.

        Examples: "PROMO50 (Mês 1: 50%)", "BEMVINDO (R$ 10,00)".
        """
        if rule.discount_type == TipoDesconto.FIXED:
            amount = format_currency(rule.discount)
        else:
            amount = format_percentage(rule.discount, decimals=2)

        if coupon.type == TipoCupom.PROGRESSIVE:
            return f"{coupon.code} (Mês {rule.month}: {amount})"
        return f"{coupon.code} ({amount})"

    @staticmethod
    def describe_schedule(coupon: Coupon) -> str:
        """Summarize a coupon, e.g. "Mês 1: 50%, Mês 3: 20%"."""
        if coupon.type == TipoCupom.PROGRESSIVE:
            parts = []
            for rule in coupon.progressive_discounts or []:
                if rule.discount_type == TipoDesconto.FIXED:
                    parts.append(f"Mês {rule.month}: {format_currency(rule.discount)}")
                else:
                    parts.append(f"Mês {rule.month}: {format_percentage(rule.discount, decimals=2)}")
            return ", ".join(parts) if parts else "Sem regras"
        if coupon.type == TipoCupom.FIXED:
            return format_currency(coupon.value)
        return format_percentage(coupon.value, decimals=2)

    @staticmethod
    def is_redeemable(coupon: Coupon, today: Optional[date] = None) -> tuple[bool, str]:
        """Check whether a coupon can still be applied to a new checkout.

        Projections never call this: a coupon already applied keeps its
        schedule after it expires or runs out of uses.

        Returns:
            (True, "") if usable
            (False, "reason") otherwise
        """
        today = today or date.today()

        if not coupon.is_active:
            return False, "Cupom desativado"

        if coupon.max_uses is not None and coupon.current_uses >= coupon.max_uses:
            return False, f"Cupom atingiu o limite de {coupon.max_uses} uso(s)"

        if coupon.expiration_date is not None and coupon.expiration_date < today:
            return False, f"Cupom expirou em {coupon.expiration_date.strftime('%d/%m/%Y')}"

        return True, ""


def find_coupon(coupons: Iterable[Coupon], coupon_used: Optional[str]) -> Optional[Coupon]:
    """Find the coupon referenced by a subscription.

    The backend stores either the coupon id or its code; ids are matched
    first, then codes (case-insensitive).
    """
    if not coupon_used:
        return None

    coupons = list(coupons)
    for coupon in coupons:
        if coupon.id == coupon_used:
            return coupon

    wanted = coupon_used.strip().upper()
    for coupon in coupons:
        if coupon.code.strip().upper() == wanted:
            return coupon

    logger.warning("Cupom {} não encontrado entre {} cupons", coupon_used, len(coupons))
    return None
