"""Proof photo resolution and proof status derivation.

Field teams never mark a photo as "latest": for each canonical slot the photo
with the greatest ``uploaded_at`` is picked automatically. Campaign assets that
predate the ``media_photos`` table carry a pre-aggregated ``photos`` JSONB blob
instead, which is parsed with a static alias table.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from ooh_proofs.domain.proofs import (
    CampaignAssetProof,
    ExportPhoto,
    LatestPhotos,
    PhotoCount,
    PhotoRecord,
    PhotoSlot,
    ProofStatus,
    ProofSummary,
)

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0, tz=UTC)
TERMINAL_STATUSES = frozenset({ProofStatus.VERIFIED, ProofStatus.FAILED})
DEFAULT_RECORD_LIMIT = 20


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda value: any(needle in value for needle in needles)


def _equals_any(*options: str) -> Callable[[str], bool]:
    return lambda value: value in options


def _either(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda value: any(predicate(value) for predicate in predicates)


def _unsided_traffic(value: str) -> bool:
    return "traffic" in value and "1" not in value and "2" not in value


# Evaluated top to bottom; the first matching rule decides the slot.
CATEGORY_RULES: tuple[tuple[Callable[[str], bool], PhotoSlot], ...] = (
    (_either(_contains_any("newspaper"), _equals_any("news")), PhotoSlot.NEWSPAPER),
    (_either(_contains_any("geo"), _equals_any("gps", "location")), PhotoSlot.GEOTAG),
    (
        _either(
            _contains_any("traffic1", "traffic-1", "traffic_left"),
            _equals_any("traffic left"),
        ),
        PhotoSlot.TRAFFIC1,
    ),
    (
        _either(
            _contains_any("traffic2", "traffic-2", "traffic_right"),
            _equals_any("traffic right"),
        ),
        PhotoSlot.TRAFFIC2,
    ),
    (_unsided_traffic, PhotoSlot.TRAFFIC1),
)

BLOB_ALIASES: dict[PhotoSlot, tuple[str, ...]] = {
    PhotoSlot.NEWSPAPER: ("newspaper", "news"),
    PhotoSlot.GEOTAG: ("geo", "geotag", "gps"),
    PhotoSlot.TRAFFIC1: ("traffic1", "traffic_left", "trafficLeft"),
    PhotoSlot.TRAFFIC2: ("traffic2", "traffic_right", "trafficRight"),
}

EXPORT_LABELS: tuple[tuple[PhotoSlot, str], ...] = (
    (PhotoSlot.NEWSPAPER, "Newspaper Ad"),
    (PhotoSlot.GEOTAG, "Geo-tagged Photo"),
    (PhotoSlot.TRAFFIC1, "Traffic View 1"),
    (PhotoSlot.TRAFFIC2, "Traffic View 2"),
)


def normalize_photo_category(category: str | None) -> PhotoSlot | None:
    """Map a free-form photo category onto a canonical slot."""
    value = (category or "").lower()
    for predicate, slot in CATEGORY_RULES:
        if predicate(value):
            return slot
    return None


def derive_latest_photos(records: Iterable[PhotoRecord]) -> LatestPhotos:
    """Select the most recently uploaded photo for each slot.

    A later record only replaces a slot when its timestamp is strictly
    greater, so on equal timestamps the first record seen is kept.
    """
    urls: dict[PhotoSlot, str] = {}
    timestamps: dict[PhotoSlot, datetime] = {}
    for record in records:
        if not record.photo_url:
            continue
        slot = normalize_photo_category(record.category)
        if slot is None:
            continue
        uploaded_at = _effective_timestamp(record.uploaded_at)
        current = timestamps.get(slot)
        if current is None or uploaded_at > current:
            urls[slot] = record.photo_url
            timestamps[slot] = uploaded_at
    return LatestPhotos(**{slot.value: url for slot, url in urls.items()})


def parse_photos_blob(blob: object) -> LatestPhotos:
    """Parse a campaign asset ``photos`` JSONB value into latest photos."""
    if not isinstance(blob, Mapping):
        return LatestPhotos()
    resolved: dict[str, str] = {}
    for slot, aliases in BLOB_ALIASES.items():
        for alias in aliases:
            value = blob.get(alias)
            if isinstance(value, str) and value:
                resolved[slot.value] = value
                break
    return LatestPhotos(**resolved)


def calculate_proof_status(
    photos: LatestPhotos, external_status: str | None = None
) -> ProofStatus:
    """Return the proof status, honouring a terminal QA decision."""
    if external_status in TERMINAL_STATUSES:
        return ProofStatus(external_status)
    has_traffic = bool(photos.traffic1) or bool(photos.traffic2)
    if photos.newspaper and photos.geotag and has_traffic:
        return ProofStatus.READY_FOR_QA
    return ProofStatus.PENDING


def count_photos(photos: LatestPhotos) -> PhotoCount:
    """Return how many canonical slots hold a photo."""
    return PhotoCount(uploaded=sum(1 for slot in PhotoSlot if photos.get(slot)))


def preview_photo(photos: LatestPhotos) -> str | None:
    """Return the first available photo for thumbnails."""
    for slot, _label in EXPORT_LABELS:
        url = photos.get(slot)
        if url:
            return url
    return None


def photos_for_export(photos: LatestPhotos) -> list[ExportPhoto]:
    """Return filled slots in export order with their labels."""
    return [
        ExportPhoto(url=url, label=label)
        for slot, label in EXPORT_LABELS
        if (url := photos.get(slot))
    ]


def _effective_timestamp(value: datetime | None) -> datetime:
    if value is None:
        return EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ProofPhotoRepository(Protocol):
    """Read interface for proof photo data."""

    def list_photo_records(
        self, campaign_id: str, asset_id: str, limit: int
    ) -> list[PhotoRecord]:
        """Return uploaded photo records for a campaign asset."""

    def get_campaign_asset(
        self, campaign_id: str, asset_id: str
    ) -> CampaignAssetProof | None:
        """Return the proof fields of a campaign asset, if present."""


@dataclass
class ProofPhotoService:
    """Resolves proof photos and status for campaign assets."""

    repository: ProofPhotoRepository
    record_limit: int = DEFAULT_RECORD_LIMIT

    def fetch_latest_photos(self, campaign_id: str, asset_id: str) -> LatestPhotos:
        """Return latest photos, falling back to the JSONB blob when no rows."""
        return self._resolve_photos(
            campaign_id, asset_id, self.repository.get_campaign_asset
        )

    def get_proof_summary(self, campaign_id: str, asset_id: str) -> ProofSummary:
        """Return resolved photos together with the derived proof status."""
        asset = self.repository.get_campaign_asset(campaign_id, asset_id)
        photos = self._resolve_photos(campaign_id, asset_id, lambda *_ids: asset)
        external_status = asset.installation_status if asset else None
        status = calculate_proof_status(photos, external_status)
        logger.info(
            "Proof status for campaign %s asset %s: %s",
            campaign_id,
            asset_id,
            status.value,
        )
        return ProofSummary(
            photos=photos,
            status=status,
            count=count_photos(photos),
            preview=preview_photo(photos),
            export=photos_for_export(photos),
        )

    def _resolve_photos(
        self,
        campaign_id: str,
        asset_id: str,
        load_asset: Callable[[str, str], CampaignAssetProof | None],
    ) -> LatestPhotos:
        """Derive photos from records; use the blob only when no records exist."""
        records = self.repository.list_photo_records(
            campaign_id, asset_id, self.record_limit
        )
        if records:
            return derive_latest_photos(records)
        asset = load_asset(campaign_id, asset_id)
        if asset is None or not asset.photos:
            return LatestPhotos()
        logger.debug(
            "No media photos for campaign %s asset %s; using photos blob",
            campaign_id,
            asset_id,
        )
        return parse_photos_blob(asset.photos)
