"""GET /secret/{id} — Verify the default secret is readable, echo the event."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..dependencies import get_secret_store
from ..exceptions import SecretLookupError
from ..secret_store import SecretStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _triggering_event(request: Request, path_id: str) -> dict[str, Any]:
    """The raw API Gateway event, or a minimal stand-in outside Lambda."""
    event = request.scope.get("aws.event")
    if event is not None:
        return event

    return {
        "rawPath": request.url.path,
        "pathParameters": {"id": path_id},
        "queryStringParameters": dict(request.query_params) or None,
        "headers": dict(request.headers),
        "requestContext": {"http": {"method": request.method}},
    }


@router.get("/secret/{id}")
async def check_secret(
    id: str,
    request: Request,
    store: SecretStore = Depends(get_secret_store),
):
    s = get_settings()
    try:
        # Only readability matters here; the value is dropped.
        await store.get_secret(s.default_secret_name, s.secret_version_stage)
    except SecretLookupError as e:
        logger.error("Secret lookup failed: %s", e)
        return JSONResponse(
            {"error": "Secret lookup failed", "message": str(e)},
            status_code=500,
        )

    body = json.dumps(_triggering_event(request, id), indent="\t", default=str)
    return Response(content=body, media_type="application/json")
