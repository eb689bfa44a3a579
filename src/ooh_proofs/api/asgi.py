"""ASGI entrypoint for the OOH proofs API."""

from ooh_proofs.api.app import create_app
from ooh_proofs.containers import build_container

app = create_app(build_container())
