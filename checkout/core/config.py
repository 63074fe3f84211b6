import logging
from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Standard discount: applies above the threshold
    standard_threshold: Decimal = Field(
        default=Decimal("100"), alias="STANDARD_DISCOUNT_THRESHOLD"
    )
    standard_rate: Decimal = Field(default=Decimal("0.10"), alias="STANDARD_DISCOUNT_RATE")

    # VIP customers
    vip_rate: Decimal = Field(default=Decimal("0.05"), alias="VIP_DISCOUNT_RATE")

    # Coupon
    coupon_code: str = Field(default="SAVE20", alias="COUPON_CODE")
    coupon_rate: Decimal = Field(default=Decimal("0.20"), alias="COUPON_DISCOUNT_RATE")

    # Ceiling for the combined discount, as a fraction of the order total
    max_discount_rate: Decimal = Field(default=Decimal("0.50"), alias="MAX_DISCOUNT_RATE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator(
        "standard_rate", "vip_rate", "coupon_rate", "max_discount_rate"
    )
    @classmethod
    def rate_is_fraction(cls, v: Decimal) -> Decimal:
        """Rates are fractions of the order total."""
        if not (Decimal("0") <= v <= Decimal("1")):
            raise ValueError("Discount rates must be between 0 and 1")
        return v

    @field_validator("standard_threshold")
    @classmethod
    def threshold_not_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Standard discount threshold must be >= 0")
        return v

    @field_validator("coupon_code", mode="before")
    @classmethod
    def strip_coupon_code(cls, v: str) -> str:
        """Strip whitespace and reject blank coupon codes."""
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError("COUPON_CODE must not be empty")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
