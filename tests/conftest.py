import os
from dataclasses import dataclass
from decimal import Decimal

# Set environment variables BEFORE any imports that might use settings,
# so a developer's local .env cannot change the expected discounts.
os.environ["STANDARD_DISCOUNT_THRESHOLD"] = "100"
os.environ["STANDARD_DISCOUNT_RATE"] = "0.10"
os.environ["VIP_DISCOUNT_RATE"] = "0.05"
os.environ["COUPON_CODE"] = "SAVE20"
os.environ["COUPON_DISCOUNT_RATE"] = "0.20"
os.environ["MAX_DISCOUNT_RATE"] = "0.50"
os.environ["LOG_LEVEL"] = "INFO"

import pytest

from checkout.domain.discounts import (
    CouponDiscountRule,
    StandardDiscountRule,
    VIPDiscountRule,
)
from checkout.domain.order import CustomerType, Order


@dataclass(frozen=True)
class FixedDiscountRule:
    """Rule returning the same discount for every order."""

    amount: Decimal

    def calculate_discount(self, order: Order) -> Decimal:
        return self.amount


@pytest.fixture(scope="function")
def order() -> Order:
    """Standard customer, no coupon, total 200."""
    return Order(
        id=1,
        total_amount=Decimal("200"),
        customer_type=CustomerType.STANDARD,
        coupon_code=None,
    )


@pytest.fixture(scope="function")
def vip_coupon_order() -> Order:
    return Order(
        id=2,
        total_amount=Decimal("300"),
        customer_type=CustomerType.VIP,
        coupon_code="SAVE20",
    )


@pytest.fixture(scope="function")
def builtin_rules() -> list:
    """Standard, VIP and coupon rules with their default parameters."""
    return [StandardDiscountRule(), VIPDiscountRule(), CouponDiscountRule()]


@pytest.fixture(scope="function")
def fixed_rule():
    """Factory for rules that always return the given discount."""

    def _make(amount) -> FixedDiscountRule:
        return FixedDiscountRule(Decimal(str(amount)))

    return _make
