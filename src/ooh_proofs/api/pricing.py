"""Per-asset pricing endpoints."""

from fastapi import APIRouter, Depends

from ooh_proofs.api.auth import require_api_token
from ooh_proofs.api.models import RentQuoteRequest, RentQuoteResponse
from ooh_proofs.services.pricing import (
    compute_pro_rata_factor,
    compute_rent_amount,
    format_billing_mode,
)

router = APIRouter(
    prefix="/pricing", tags=["pricing"], dependencies=[Depends(require_api_token)]
)


@router.post("/rent")
async def rent_quote(body: RentQuoteRequest) -> RentQuoteResponse:
    """Return the rent for an asset booking."""
    result = compute_rent_amount(
        body.monthly_rate,
        body.start_date,
        body.end_date,
        body.billing_mode,
        body.daily_rate,
    )
    return RentQuoteResponse(
        booked_days=result.booked_days,
        daily_rate=result.daily_rate,
        rent_amount=result.rent_amount,
        billing_mode=result.billing_mode,
        billing_mode_label=format_billing_mode(result.billing_mode),
        pro_rata_factor=compute_pro_rata_factor(result.booked_days),
    )
