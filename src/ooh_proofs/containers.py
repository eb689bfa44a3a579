"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from ooh_proofs.adapters.supabase_proof_photo_repository import (
    SupabaseProofPhotoRepository,
)
from ooh_proofs.config import Settings
from ooh_proofs.services.proofs import ProofPhotoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    proof_photo_service: ProofPhotoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    proof_photo_repository = SupabaseProofPhotoRepository(supabase_client)
    proof_photo_service = ProofPhotoService(
        repository=proof_photo_repository,
        record_limit=resolved_settings.photo_record_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        proof_photo_service=proof_photo_service,
    )
