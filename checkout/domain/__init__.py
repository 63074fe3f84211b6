"""Domain-level pricing policies.

This package contains the order entity and the discount rules that define
*how much* an order is discounted, independent from *where* the rules are
assembled and applied (see ``checkout.services``).
"""

from checkout.domain.discounts import (
    CompositeDiscountRule,
    CouponDiscountRule,
    DiscountRule,
    StandardDiscountRule,
    VIPDiscountRule,
)
from checkout.domain.order import CustomerType, Order

__all__ = [
    "CompositeDiscountRule",
    "CouponDiscountRule",
    "CustomerType",
    "DiscountRule",
    "Order",
    "StandardDiscountRule",
    "VIPDiscountRule",
]
