"""Domain models for per-asset pricing."""

from dataclasses import dataclass
from enum import StrEnum


class BillingMode(StrEnum):
    """How rent is charged for a booked asset."""

    FULL_MONTH = "FULL_MONTH"
    PRORATA_30 = "PRORATA_30"
    DAILY = "DAILY"


@dataclass(frozen=True)
class AssetRentResult:
    """Rent computed for an asset booking."""

    booked_days: int
    daily_rate: float
    rent_amount: float
    billing_mode: BillingMode
