from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CustomerType(str, Enum):
    STANDARD = "Standard"
    VIP = "VIP"


@dataclass(slots=True)
class Order:
    """A retail order as seen by the discount rules.

    Rules only read an order. Callers may adjust fields before pricing, but
    not while a calculation is running.
    """

    id: int
    total_amount: Decimal
    customer_type: CustomerType = CustomerType.STANDARD
    coupon_code: str | None = None
