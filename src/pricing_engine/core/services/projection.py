"""Subscription price projection and MRR.

Computes what a subscriber pays in a calendar month, the 13-month revenue
table shown in the admin panel and the live Monthly Recurring Revenue.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from loguru import logger

from pricing_engine.core.models.coupon import Coupon
from pricing_engine.core.models.enums import CicloCobranca, Plano, TipoCupom
from pricing_engine.core.models.periods import YearMonth
from pricing_engine.core.models.projection import (
    FleetProjection,
    MonthPrice,
    ProjectionRow,
    SubscriberProjection,
)
from pricing_engine.core.models.subscription import Subscription
from pricing_engine.core.rules.plan_prices import (
    DATA_INICIO_PADRAO,
    MESES_JANELA_PROJECAO,
    MESES_POR_ANO,
    PLAN_PRICES,
    ROTULO_PRIMEIRO_MES,
)
from pricing_engine.core.rules.tax_constants import arredondar
from pricing_engine.core.services.coupon_resolver import CouponResolver, find_coupon

ZERO = Decimal("0")


class ProjectionEngine:
    """Prices subscriptions month by month.

    All methods are pure: records are read, never modified, and nothing is
    cached between calls.
    """

    def __init__(
        self,
        price_table: Optional[Mapping[tuple[Plano, CicloCobranca], Decimal]] = None,
        resolver: Optional[CouponResolver] = None,
    ):
        self.price_table = PLAN_PRICES if price_table is None else price_table
        self.resolver = resolver or CouponResolver()

    def plan_price(self, plan: Plano, cycle: CicloCobranca) -> Optional[Decimal]:
        """Monthly-equivalent price of a plan, or None if not in the table."""
        price = self.price_table.get((plan, cycle))
        if price is None:
            logger.warning(
                "Sem preço cadastrado para plano={} ciclo={}", plan.value, cycle.value
            )
            return None

        if cycle == CicloCobranca.ANNUAL:
            return price / MESES_POR_ANO
        return price

    def resolve_start_date(self, subscription: Subscription) -> date:
        """Subscription start, else account creation, else the default epoch."""
        if subscription.start_date is not None:
            return subscription.start_date
        if subscription.account_created_at is not None:
            return subscription.account_created_at

        logger.warning(
            "Assinatura {} sem data de início; usando {}",
            subscription.id or "-",
            DATA_INICIO_PADRAO.isoformat(),
        )
        return DATA_INICIO_PADRAO

    def subscriber_month_index(self, subscription: Subscription, target: YearMonth) -> int:
        """1 in the start month, 2 in the next one; below 1 before the start."""
        start = YearMonth.from_date(self.resolve_start_date(subscription))
        return target.months_since(start) + 1

    def coupon_month_index(self, subscription: Subscription, target: YearMonth) -> int:
        """Coupon month counter for ``target``.

        With an explicit coupon start month the counter is 1 in that month
        and -1 (inactive) before it. Otherwise the coupon follows the
        subscriber's own month counter.
        """
        if subscription.coupon_start_month is not None:
            if target < subscription.coupon_start_month:
                return -1
            return target.months_since(subscription.coupon_start_month) + 1

        return self.subscriber_month_index(subscription, target)

    def price_for_month(
        self,
        subscription: Subscription,
        coupon: Optional[Coupon],
        target: YearMonth,
    ) -> Optional[MonthPrice]:
        """Price owed by a subscriber in ``target``.

        Returns:
            MonthPrice, or None when the subscriber had not started yet
        """
        subscriber_index = self.subscriber_month_index(subscription, target)
        if subscriber_index < 1:
            return None

        if subscriber_index == 1 and subscription.first_month_override_price is not None:
            return MonthPrice(
                month=target,
                value=subscription.first_month_override_price,
                discount_label=ROTULO_PRIMEIRO_MES,
            )

        plan_price = self.plan_price(subscription.plan, subscription.billing_cycle)
        if plan_price is None:
            return MonthPrice(month=target, value=ZERO, price_unavailable=True)

        final_price = plan_price
        label = None

        if coupon is not None and plan_price > 0:
            coupon_index = self.coupon_month_index(subscription, target)
            rule = self.resolver.resolve(coupon, coupon_index)
            if rule is not None:
                final_price = self.resolver.apply_discount(plan_price, rule)
                label = self.resolver.describe_rule(coupon, rule)
            elif coupon.type == TipoCupom.PROGRESSIVE and coupon_index >= 1:
                logger.debug(
                    "Cupom {} sem regra para o mês {}; preço cheio", coupon.code, coupon_index
                )

        return MonthPrice(
            month=target,
            value=max(arredondar(final_price), ZERO),
            discount_label=label,
        )

    @staticmethod
    def projection_window(today: Optional[date] = None) -> list[YearMonth]:
        """December of last year through December of this year."""
        today = today or date.today()
        first = YearMonth(year=today.year - 1, month=12)
        return [first.shift(i) for i in range(MESES_JANELA_PROJECAO)]

    def project_subscriber(
        self,
        subscription: Subscription,
        coupon: Optional[Coupon],
        today: Optional[date] = None,
    ) -> SubscriberProjection:
        """Price table of one subscriber over the projection window."""
        rows = []
        for month in self.projection_window(today):
            price = self.price_for_month(subscription, coupon, month)
            if price is None:
                rows.append(ProjectionRow(month=month))
            else:
                rows.append(
                    ProjectionRow(
                        month=month,
                        value=price.value,
                        discount_label=price.discount_label,
                        price_unavailable=price.price_unavailable,
                    )
                )
        return SubscriberProjection(subscription=subscription, rows=rows)

    def project_fleet(
        self,
        subscriptions: Iterable[Subscription],
        coupons: Iterable[Coupon] = (),
        today: Optional[date] = None,
    ) -> FleetProjection:
        """Projection of every subscriber plus monthly totals.

        Months where a subscriber had not started count as zero in the
        totals.
        """
        months = self.projection_window(today)
        coupons = list(coupons)

        subscribers = [
            self.project_subscriber(sub, find_coupon(coupons, sub.coupon_used), today)
            for sub in subscriptions
        ]

        totals = [
            sum(
                (p.rows[i].value for p in subscribers if p.rows[i].value is not None),
                ZERO,
            )
            for i in range(len(months))
        ]

        return FleetProjection(months=months, subscribers=subscribers, totals_by_month=totals)

    def current_month_mrr(
        self,
        subscriptions: Iterable[Subscription],
        coupons: Iterable[Coupon] = (),
        today: Optional[date] = None,
    ) -> Decimal:
        """Monthly Recurring Revenue: this month's price summed over active subscriptions."""
        current = YearMonth.from_date(today or date.today())
        coupons = list(coupons)

        mrr = ZERO
        for sub in subscriptions:
            if not sub.is_active:
                continue
            price = self.price_for_month(sub, find_coupon(coupons, sub.coupon_used), current)
            if price is not None:
                mrr += price.value

        logger.debug("MRR {}: {}", current, mrr)
        return mrr


def price_for_month(
    subscription: Subscription,
    coupon: Optional[Coupon],
    target: YearMonth,
) -> Optional[MonthPrice]:
    """Convenience function using the default price table."""
    return ProjectionEngine().price_for_month(subscription, coupon, target)


def calculate_mrr(
    subscriptions: Iterable[Subscription],
    coupons: Iterable[Coupon] = (),
    today: Optional[date] = None,
) -> Decimal:
    """Convenience function using the default price table."""
    return ProjectionEngine().current_month_mrr(subscriptions, coupons, today)
