"""Proof photo endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ooh_proofs.api.auth import require_api_token
from ooh_proofs.api.models import (
    ExportPhotoPayload,
    PhotoCountPayload,
    ProofSummaryResponse,
)

if TYPE_CHECKING:
    from ooh_proofs.containers import AppContainer

router = APIRouter(
    prefix="/proofs", tags=["proofs"], dependencies=[Depends(require_api_token)]
)


@router.get("/campaigns/{campaign_id}/assets/{asset_id}")
async def proof_summary(
    campaign_id: str, asset_id: str, request: Request
) -> ProofSummaryResponse:
    """Return latest proof photos and proof status for a campaign asset."""
    container: AppContainer = request.app.state.container
    summary = container.proof_photo_service.get_proof_summary(campaign_id, asset_id)
    return ProofSummaryResponse(
        campaign_id=campaign_id,
        asset_id=asset_id,
        photos=summary.photos.as_dict(),
        status=summary.status.value,
        count=PhotoCountPayload(
            uploaded=summary.count.uploaded, total=summary.count.total
        ),
        preview=summary.preview,
        export=[
            ExportPhotoPayload(url=photo.url, label=photo.label)
            for photo in summary.export
        ],
    )
