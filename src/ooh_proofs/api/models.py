"""Pydantic models for API payloads."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from ooh_proofs.domain.pricing import BillingMode

MAX_RATE = 1_000_000_000_000


class RentQuoteRequest(BaseModel):
    """Request body for a per-asset rent quote."""

    monthly_rate: float = Field(ge=0, le=MAX_RATE, allow_inf_nan=False)
    start_date: date
    end_date: date
    billing_mode: BillingMode = BillingMode.PRORATA_30
    daily_rate: float | None = Field(
        default=None, ge=0, le=MAX_RATE, allow_inf_nan=False
    )

    @model_validator(mode="after")
    def _check_dates(self) -> "RentQuoteRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class RentQuoteResponse(BaseModel):
    """Computed rent for a booking."""

    booked_days: int
    daily_rate: float
    rent_amount: float
    billing_mode: BillingMode
    billing_mode_label: str
    pro_rata_factor: float


class ExportPhotoPayload(BaseModel):
    """Photo entry in export order."""

    url: str
    label: str


class PhotoCountPayload(BaseModel):
    """Uploaded slot count."""

    uploaded: int
    total: int


class ProofSummaryResponse(BaseModel):
    """Resolved proof photos and status for a campaign asset."""

    campaign_id: str
    asset_id: str
    photos: dict[str, str | None]
    status: str
    count: PhotoCountPayload
    preview: str | None
    export: list[ExportPhotoPayload]
