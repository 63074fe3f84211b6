import logging
from decimal import Decimal
from typing import Iterable

from checkout.core.config import Settings, settings
from checkout.domain.discounts import (
    CompositeDiscountRule,
    CouponDiscountRule,
    DiscountRule,
    StandardDiscountRule,
    VIPDiscountRule,
)
from checkout.domain.order import Order
from checkout.schemas.order import PriceQuote

logger = logging.getLogger(__name__)


def build_discount_rules(config: Settings = settings) -> list[DiscountRule]:
    """Built-in rules (standard, VIP, coupon) parameterised from configuration."""
    return [
        StandardDiscountRule(
            threshold=config.standard_threshold, rate=config.standard_rate
        ),
        VIPDiscountRule(rate=config.vip_rate),
        CouponDiscountRule(code=config.coupon_code, rate=config.coupon_rate),
    ]


def build_composite_rule(
    config: Settings = settings,
    extra_rules: Iterable[DiscountRule] = (),
) -> CompositeDiscountRule:
    """
    Combine the built-in rules with any caller-supplied ones.

    - The combined discount is capped at ``config.max_discount_rate`` of the order total
    """
    rules = [*build_discount_rules(config), *extra_rules]
    return CompositeDiscountRule(rules=rules, max_rate=config.max_discount_rate)


class PricingService:
    def __init__(self, discount_rule: DiscountRule):
        self._discount_rule = discount_rule

    def calculate_final_amount(self, order: Order) -> Decimal:
        """
        Order total minus the discount of the configured rule.

        A negative result means a rule returned more than the order is worth.
        It is returned as-is and logged; callers should treat it as bad data
        or bad configuration.
        """
        discount = self._discount_rule.calculate_discount(order)
        final_amount = order.total_amount - discount
        logger.debug(
            "Order %s: total=%s discount=%s final=%s",
            order.id,
            order.total_amount,
            discount,
            final_amount,
        )
        if final_amount < 0:
            logger.warning(
                "Order %s priced below zero (%s); check order data and discount rules",
                order.id,
                final_amount,
            )
        return final_amount

    def quote(self, order: Order) -> PriceQuote:
        final_amount = self.calculate_final_amount(order)
        return PriceQuote(
            order_id=order.id,
            total_amount=order.total_amount,
            discount=order.total_amount - final_amount,
            final_amount=final_amount,
        )
