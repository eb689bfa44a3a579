"""Per-asset duration pricing shared by plans, campaigns and invoices."""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ooh_proofs.domain.pricing import AssetRentResult, BillingMode

BILLING_CYCLE_DAYS = 30
# Enough digits to quantize any finite float to cents.
_MONEY_PRECISION = 400

DateLike = date | datetime | str

_BILLING_MODE_LABELS = {
    BillingMode.FULL_MONTH: "Full Month",
    BillingMode.DAILY: "Daily",
    BillingMode.PRORATA_30: "Pro-rata (30-day)",
}


def round_money(value: float) -> float:
    """Round half-up to two decimal places.

    Rounds the shortest decimal repr, not the binary float, so 1.005 gives 1.01.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _MONEY_PRECISION
        quantized = Decimal(str(value)).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
    return float(quantized)


def to_date(value: DateLike) -> date:
    """Coerce a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


def compute_booked_days(start: DateLike, end: DateLike) -> int:
    """Return inclusive booked days between two dates, at least one."""
    days = (to_date(end) - to_date(start)).days + 1
    return max(days, 1)


def compute_daily_rate(
    monthly_rate: float,
    billing_mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: float | None = None,
    *,
    for_display: bool = True,
) -> float:
    """Return the daily rate; unrounded when used for further calculation."""
    if (
        billing_mode == BillingMode.DAILY
        and provided_daily_rate is not None
        and provided_daily_rate > 0
    ):
        daily_rate = provided_daily_rate
    else:
        daily_rate = monthly_rate / BILLING_CYCLE_DAYS
    return round_money(daily_rate) if for_display else daily_rate


def compute_rent_amount(
    monthly_rate: float,
    start: DateLike,
    end: DateLike,
    billing_mode: BillingMode = BillingMode.PRORATA_30,
    provided_daily_rate: float | None = None,
) -> AssetRentResult:
    """Return booked days, display daily rate and rounded rent for a booking.

    Pro-rata and daily rents multiply the unrounded daily rate so that, for
    example, 50000 / 30 over 180 days comes to exactly 300000.00.
    """
    booked_days = compute_booked_days(start, end)
    raw_daily_rate = compute_daily_rate(
        monthly_rate, billing_mode, provided_daily_rate, for_display=False
    )
    if billing_mode == BillingMode.FULL_MONTH:
        rent_amount = monthly_rate * math.ceil(booked_days / BILLING_CYCLE_DAYS)
    else:
        rent_amount = raw_daily_rate * booked_days
    return AssetRentResult(
        booked_days=booked_days,
        daily_rate=round_money(raw_daily_rate),
        rent_amount=round_money(rent_amount),
        billing_mode=billing_mode,
    )


def compute_pro_rata_factor(booked_days: int) -> float:
    """Return booked days as a fraction of the billing cycle."""
    return round_money(booked_days / BILLING_CYCLE_DAYS)


def compute_overlap_days(
    asset_start: DateLike,
    asset_end: DateLike,
    period_start: DateLike,
    period_end: DateLike,
) -> int:
    """Return inclusive days shared by a booking and a billing period."""
    overlap_start = max(to_date(asset_start), to_date(period_start))
    overlap_end = min(to_date(asset_end), to_date(period_end))
    if overlap_end < overlap_start:
        return 0
    return (overlap_end - overlap_start).days + 1


def compute_period_rent_amount(  # noqa: PLR0913
    monthly_rate: float,
    asset_start: DateLike,
    asset_end: DateLike,
    period_start: DateLike,
    period_end: DateLike,
    billing_mode: BillingMode = BillingMode.PRORATA_30,
) -> float:
    """Return the rent due for one billing period of a booking."""
    overlap_days = compute_overlap_days(
        asset_start, asset_end, period_start, period_end
    )
    if overlap_days == 0:
        return 0.0
    daily_rate = compute_daily_rate(monthly_rate, billing_mode)
    return round_money(daily_rate * overlap_days)


def asset_starts_in_period(
    asset_start: DateLike, period_start: DateLike, period_end: DateLike
) -> bool:
    """Return whether one-time charges belong to this billing period."""
    return to_date(period_start) <= to_date(asset_start) <= to_date(period_end)


def format_billing_mode(mode: BillingMode) -> str:
    """Return a human label for a billing mode."""
    return _BILLING_MODE_LABELS.get(mode, _BILLING_MODE_LABELS[BillingMode.PRORATA_30])
