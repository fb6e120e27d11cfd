"""Cognito post-confirmation / post-authentication trigger.

Persists every triggering event as one row of the auth-log table and hands
the event back to Cognito unchanged. A failed write fails the invocation, which
makes Cognito abort the sign-up or sign-in.

Environment variables (required):
    AUTHLOG_TABLENAME
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .. import ocsf
from ..config import configure_logging, get_settings
from ..exceptions import AuthLogWriteError
from .records import AuthLogRecord
from .store import AuthLogStore

configure_logging()

logger = logging.getLogger(__name__)

_store: AuthLogStore | None = None


def get_store() -> AuthLogStore:
    """The process-wide store, built from settings on first use."""
    global _store
    if _store is None:
        s = get_settings()
        _store = AuthLogStore(
            table_name=s.authlog_tablename,
            endpoint_url=s.dynamodb_endpoint,
            region_name=s.aws_region,
        )
    return _store


def reset_for_testing() -> None:
    global _store
    _store = None


async def handle_auth_event(
    event: dict[str, Any],
    store: AuthLogStore | None = None,
) -> dict[str, Any]:
    store = store or get_store()
    record = AuthLogRecord.from_event(event)

    try:
        await store.put(record)
    except AuthLogWriteError as e:
        logger.error("Auth log write failed: %s", e)
        ocsf.trigger_event(
            event,
            status_id=ocsf.Status.FAILURE,
            message="Auth event could not be recorded",
        )
        raise

    ocsf.trigger_event(
        event,
        status_id=ocsf.Status.SUCCESS,
        message="Auth event recorded",
    )
    return event


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda entry point wired to the user pool triggers."""
    return asyncio.run(handle_auth_event(event))
