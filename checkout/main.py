"""Demo entry point: price a sample VIP order carrying a coupon."""

import logging
from decimal import Decimal

from checkout.core.config import settings
from checkout.domain.order import CustomerType, Order
from checkout.services.pricing import PricingService, build_composite_rule

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = PricingService(build_composite_rule(settings))
    order = Order(
        id=1,
        total_amount=Decimal("300"),
        customer_type=CustomerType.VIP,
        coupon_code="SAVE20",
    )

    final_amount = service.calculate_final_amount(order)
    logger.info("Priced order %s", order.id)
    print(f"Final order amount: {final_amount}")


if __name__ == "__main__":
    main()
