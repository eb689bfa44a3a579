"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from ooh_proofs.api.pricing import router as pricing_router
from ooh_proofs.api.proofs import router as proofs_router
from ooh_proofs.app_logging import configure_logging
from ooh_proofs.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="OOH Proofs")
    app.state.container = container

    app.include_router(proofs_router)
    app.include_router(pricing_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info("OOH proofs API ready (%s)", container.settings.environment)
    return app
