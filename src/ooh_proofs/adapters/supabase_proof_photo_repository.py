"""Supabase-backed proof photo repository."""

import logging
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from ooh_proofs.domain.proofs import CampaignAssetProof, PhotoRecord
from ooh_proofs.services.proofs import ProofPhotoRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseProofPhotoRepository(ProofPhotoRepository):
    """Supabase implementation reading media photos and campaign assets."""

    client: Client

    def list_photo_records(
        self, campaign_id: str, asset_id: str, limit: int
    ) -> list[PhotoRecord]:
        """Return the most recent photo rows for a campaign asset."""
        response = (
            self.client.table("media_photos")
            .select("id, photo_url, category, uploaded_at")
            .eq("campaign_id", campaign_id)
            .eq("asset_id", asset_id)
            .order("uploaded_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_photo_row(row) for row in response.data or []]

    def get_campaign_asset(
        self, campaign_id: str, asset_id: str
    ) -> CampaignAssetProof | None:
        """Return the photos blob and installation status of a campaign asset."""
        response = (
            self.client.table("campaign_assets")
            .select("photos, installation_status")
            .eq("campaign_id", campaign_id)
            .eq("asset_id", asset_id)
            .maybe_single()
            .execute()
        )
        if response is None or not response.data:
            return None
        row = response.data
        photos = row.get("photos")
        status = row.get("installation_status")
        return CampaignAssetProof(
            photos=photos if isinstance(photos, dict) else None,
            installation_status=status if isinstance(status, str) else None,
        )


def _parse_photo_row(row: dict[str, object]) -> PhotoRecord:
    photo_url = row.get("photo_url")
    category = row.get("category")
    return PhotoRecord(
        id=str(row["id"]),
        photo_url=photo_url if isinstance(photo_url, str) else None,
        category=category if isinstance(category, str) else None,
        uploaded_at=_parse_timestamp(row.get("uploaded_at")),
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        logger.warning("Unparseable uploaded_at value: %s", raw)
        return None
