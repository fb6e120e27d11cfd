"""FastAPI dependency injection: shared AWS clients."""

from __future__ import annotations

from fastapi import Request

from .secret_store import SecretStore


def get_secret_store(request: Request) -> SecretStore:
    """Get the process-wide SecretStore attached in create_app()."""
    return request.app.state.secret_store
