from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from checkout.domain.order import CustomerType, Order
from checkout.errors import DomainValidationError


class OrderCreate(BaseModel):
    """Untrusted order input, checked before it reaches the discount rules."""

    id: int = Field(..., ge=1, description="Order identifier")
    total_amount: Decimal = Field(..., ge=0, description="Order total (must be >= 0)")
    customer_type: CustomerType = Field(
        default=CustomerType.STANDARD, description="Standard or VIP"
    )
    coupon_code: str | None = Field(None, description="Coupon code (optional)")

    @field_validator("customer_type", mode="before")
    @classmethod
    def normalize_customer_type(cls, v: Any) -> Any:
        """Accept 'standard', 'vip', 'VIP', ... regardless of case."""
        if isinstance(v, str):
            for member in CustomerType:
                if member.value.casefold() == v.strip().casefold():
                    return member
        return v

    @field_validator("coupon_code", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Strip the code and convert empty strings to None."""
        if isinstance(v, str):
            v = v.strip()
            if v == "":
                return None
        return v

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "OrderCreate":
        """
        Validate a raw mapping.

        Raises:
            DomainValidationError: If any field is missing or invalid.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise DomainValidationError(f"Invalid order: {details}") from e

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            total_amount=self.total_amount,
            customer_type=self.customer_type,
            coupon_code=self.coupon_code,
        )


class PriceQuote(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: int
    total_amount: Decimal
    discount: Decimal
    final_amount: Decimal
