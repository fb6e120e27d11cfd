"""FastAPI app behind the TestAPI HTTP API.

Exposes the secret-check endpoint that proves the Lambda role can read the
default secret.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import health, secret
from .secret_store import SecretStore


def create_app(*, secret_store: SecretStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        secret_store: Custom secret store (default: one built from settings).
    """
    app = FastAPI(title="Mario Secret Check")
    s = get_settings()

    # CORS, mirroring the HTTP API preflight config in deploy/stack.py
    app.add_middleware(
        CORSMiddleware,
        allow_origins=s.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
        allow_headers=["Authorization"],
    )

    app.state.secret_store = secret_store or SecretStore(
        endpoint_url=s.secretsmanager_endpoint,
        region_name=s.aws_region,
    )

    # Routes
    app.include_router(secret.router)
    app.include_router(health.router)

    return app
