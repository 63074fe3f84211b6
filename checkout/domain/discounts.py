"""Discount rules and the policy that combines them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol, runtime_checkable

from checkout.domain.order import CustomerType, Order

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@runtime_checkable
class DiscountRule(Protocol):
    """Anything that maps an order to a discount amount (>= 0)."""

    def calculate_discount(self, order: Order) -> Decimal:
        ...


@dataclass(frozen=True, slots=True)
class StandardDiscountRule:
    """Percentage off orders strictly above a threshold.

    An order of exactly ``threshold`` gets nothing.
    """

    threshold: Decimal = Decimal("100")
    rate: Decimal = Decimal("0.10")

    def calculate_discount(self, order: Order) -> Decimal:
        if order.total_amount > self.threshold:
            return order.total_amount * self.rate
        return ZERO


@dataclass(frozen=True, slots=True)
class VIPDiscountRule:
    rate: Decimal = Decimal("0.05")

    def calculate_discount(self, order: Order) -> Decimal:
        if order.customer_type == CustomerType.VIP:
            return order.total_amount * self.rate
        return ZERO


@dataclass(frozen=True, slots=True)
class CouponDiscountRule:
    """Percentage off when the order carries the configured coupon code.

    Codes are compared case-insensitively with ``str.casefold``, so the
    result does not depend on the current locale.
    """

    code: str = "SAVE20"
    rate: Decimal = Decimal("0.20")

    def calculate_discount(self, order: Order) -> Decimal:
        if order.coupon_code and order.coupon_code.casefold() == self.code.casefold():
            return order.total_amount * self.rate
        return ZERO


@dataclass(frozen=True, slots=True)
class CompositeDiscountRule:
    """Sums the discounts of several rules and caps the result.

    Semantics:
    - discount = sum(rule.calculate_discount(order) for rule in rules)
    - ceiling = order.total_amount * max_rate
    - result = min(discount, ceiling)

    Rules are independent, so their order does not matter. A rule that
    returns more than the order is worth is still bounded by the ceiling;
    nothing is raised for it.
    """

    rules: Iterable[DiscountRule] = ()
    max_rate: Decimal = Decimal("0.50")

    def __post_init__(self) -> None:
        # Materialize once so a generator can't be exhausted between calls.
        object.__setattr__(self, "rules", tuple(self.rules))

    def calculate_discount(self, order: Order) -> Decimal:
        total = sum((rule.calculate_discount(order) for rule in self.rules), ZERO)
        ceiling = order.total_amount * self.max_rate
        if total > ceiling:
            logger.debug(
                "Order %s: discount %s capped at %s", order.id, total, ceiling
            )
            return ceiling
        return total
