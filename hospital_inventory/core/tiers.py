from datetime import datetime, timezone
from enum import Enum

from hospital_inventory.core.constants import (
    EXPIRY_URGENT_DAYS,
    EXPIRY_WARNING_DAYS,
    QUANTITY_HIGH_ABOVE,
    QUANTITY_MEDIUM_ABOVE,
)
from hospital_inventory.core.dates import as_utc_datetime

_SECONDS_PER_DAY = 24 * 60 * 60


class QuantityTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ExpiryTier(str, Enum):
    SAFE = "SAFE"
    WARNING = "WARNING"
    URGENT = "URGENT"


# (background, text) badge classes, green/yellow/red.
_GREEN = ("bg-green-500", "text-green-50")
_YELLOW = ("bg-yellow-500", "text-yellow-50")
_RED = ("bg-red-500", "text-red-50")

QUANTITY_BADGE_CLASSES = {
    QuantityTier.HIGH: _GREEN,
    QuantityTier.MEDIUM: _YELLOW,
    QuantityTier.LOW: _RED,
}

EXPIRY_BADGE_CLASSES = {
    ExpiryTier.SAFE: _GREEN,
    ExpiryTier.WARNING: _YELLOW,
    ExpiryTier.URGENT: _RED,
}


def parse_quantity(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


def quantity_tier(quantity) -> QuantityTier:
    value = parse_quantity(quantity)
    if value is None:
        return QuantityTier.LOW
    if value > QUANTITY_HIGH_ABOVE:
        return QuantityTier.HIGH
    if value > QUANTITY_MEDIUM_ABOVE:
        return QuantityTier.MEDIUM
    return QuantityTier.LOW


def days_until(expiry, now: datetime | None = None) -> float | None:
    expiry_at = as_utc_datetime(expiry)
    if expiry_at is None:
        return None
    now = as_utc_datetime(now) if now is not None else datetime.now(timezone.utc)
    return (expiry_at - now).total_seconds() / _SECONDS_PER_DAY


def expiry_tier(expiry, now: datetime | None = None) -> ExpiryTier:
    days = days_until(expiry, now)
    if days is None or days <= EXPIRY_URGENT_DAYS:
        return ExpiryTier.URGENT
    if days <= EXPIRY_WARNING_DAYS:
        return ExpiryTier.WARNING
    return ExpiryTier.SAFE


__all__ = [
    "EXPIRY_BADGE_CLASSES",
    "QUANTITY_BADGE_CLASSES",
    "ExpiryTier",
    "QuantityTier",
    "days_until",
    "expiry_tier",
    "parse_quantity",
    "quantity_tier",
]
