"""Domain models for proof-of-installation photos."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class PhotoSlot(StrEnum):
    """Canonical proof photo slots."""

    NEWSPAPER = "newspaper"
    GEOTAG = "geotag"
    TRAFFIC1 = "traffic1"
    TRAFFIC2 = "traffic2"


class ProofStatus(StrEnum):
    """Proof readiness of a campaign asset."""

    PENDING = "Pending"
    READY_FOR_QA = "Ready for QA"
    VERIFIED = "Verified"
    FAILED = "Failed"


@dataclass(frozen=True)
class PhotoRecord:
    """Uploaded proof photo row."""

    id: str
    photo_url: str | None
    category: str | None
    uploaded_at: datetime | None


@dataclass(frozen=True)
class LatestPhotos:
    """Latest photo URL per canonical slot."""

    newspaper: str | None = None
    geotag: str | None = None
    traffic1: str | None = None
    traffic2: str | None = None

    def get(self, slot: PhotoSlot) -> str | None:
        """Return the URL stored for a slot."""
        return getattr(self, slot.value)

    def as_dict(self) -> dict[str, str | None]:
        """Return the slots keyed by slot name."""
        return {slot.value: self.get(slot) for slot in PhotoSlot}


@dataclass(frozen=True)
class ExportPhoto:
    """Photo prepared for slide or report export."""

    url: str
    label: str


@dataclass(frozen=True)
class PhotoCount:
    """Uploaded slot count out of the four canonical slots."""

    uploaded: int
    total: int = len(PhotoSlot)


@dataclass(frozen=True)
class CampaignAssetProof:
    """Proof fields stored on a campaign asset row."""

    photos: dict[str, object] | None
    installation_status: str | None


@dataclass(frozen=True)
class ProofSummary:
    """Resolved proof state for a campaign asset."""

    photos: LatestPhotos
    status: ProofStatus
    count: PhotoCount
    preview: str | None
    export: list[ExportPhoto]
