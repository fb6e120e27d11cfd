"""OCSF (Open Cybersecurity Schema Framework) event logging.

Emits structured security events for the Cognito triggers handled by the
auth-log Lambda. Events are logged to the ``ocsf`` logger as JSON; consumers
attach their own handlers (CloudWatch subscription filter, Firehose, etc.).

Usage in the trigger::

    from .. import ocsf
    ocsf.trigger_event(event, status_id=ocsf.Status.SUCCESS)
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, NamedTuple

logger = logging.getLogger("ocsf")

# ── OCSF Constants ─────────────────────────────────────────────────────────


class EventClass:
    AUTHENTICATION = 3001
    ACCOUNT_CHANGE = 3002


class AuthActivity:
    LOGON = 1
    OTHER = 99


class AccountActivity:
    CREATE = 1
    PASSWORD_RESET = 4


class Status:
    SUCCESS = 1
    FAILURE = 2


class Severity:
    INFORMATIONAL = 1
    MEDIUM = 3


_SEVERITY_NAMES = {
    Severity.INFORMATIONAL: "Informational",
    Severity.MEDIUM: "Medium",
}

_CLASS_NAMES = {
    EventClass.AUTHENTICATION: "Authentication",
    EventClass.ACCOUNT_CHANGE: "Account Change",
}

_PRODUCT = {
    "name": "mario-authlog",
    "version": "0.1.0",
    "vendor_name": "Mario",
}


class TriggerActivity(NamedTuple):
    class_uid: int
    activity_id: int
    activity_name: str


_TRIGGER_ACTIVITIES = {
    "PostAuthentication_Authentication": TriggerActivity(
        EventClass.AUTHENTICATION, AuthActivity.LOGON, "Logon"
    ),
    "PostConfirmation_ConfirmSignUp": TriggerActivity(
        EventClass.ACCOUNT_CHANGE, AccountActivity.CREATE, "Create"
    ),
    "PostConfirmation_ConfirmForgotPassword": TriggerActivity(
        EventClass.ACCOUNT_CHANGE, AccountActivity.PASSWORD_RESET, "Password Reset"
    ),
}

_OTHER = TriggerActivity(EventClass.AUTHENTICATION, AuthActivity.OTHER, "Other")


# ── Core emit ──────────────────────────────────────────────────────────────


def emit(event: dict[str, Any]) -> None:
    """Log an OCSF event as JSON."""
    try:
        payload = json.dumps(event, default=str)
    except (TypeError, ValueError) as e:
        logger.warning("Dropping unserializable OCSF event: %s", e)
        return
    logger.info(payload)


# ── Event builders ─────────────────────────────────────────────────────────


def _base_event(
    *,
    class_uid: int,
    activity_id: int,
    activity_name: str,
    status_id: int,
    severity_id: int,
    user_email: str | None,
    user_name: str | None,
    message: str,
    extra_metadata: dict[str, Any] | None,
) -> dict[str, Any]:
    event: dict[str, Any] = {
        "class_uid": class_uid,
        "class_name": _CLASS_NAMES[class_uid],
        "activity_id": activity_id,
        "activity_name": activity_name,
        "severity_id": severity_id,
        "severity": _SEVERITY_NAMES.get(severity_id, "Unknown"),
        "status_id": status_id,
        "status": "Success" if status_id == Status.SUCCESS else "Failure",
        "time": int(time.time() * 1000),
        "metadata": {
            "product": _PRODUCT,
            **(extra_metadata or {}),
        },
        "message": message,
    }
    if user_email or user_name:
        user: dict[str, Any] = {"type_id": 1, "type": "User"}
        if user_email:
            user["email_addr"] = user_email
        if user_name:
            user["name"] = user_name
        event["actor"] = {"user": user}
    return event


def authentication_event(
    *,
    activity_id: int,
    activity_name: str,
    status_id: int,
    severity_id: int,
    user_email: str | None = None,
    user_name: str | None = None,
    message: str = "",
    extra_metadata: dict[str, Any] | None = None,
) -> None:
    """Emit an OCSF Authentication (3001) event."""
    emit(
        _base_event(
            class_uid=EventClass.AUTHENTICATION,
            activity_id=activity_id,
            activity_name=activity_name,
            status_id=status_id,
            severity_id=severity_id,
            user_email=user_email,
            user_name=user_name,
            message=message,
            extra_metadata=extra_metadata,
        )
    )


def account_change_event(
    *,
    activity_id: int,
    activity_name: str,
    status_id: int,
    severity_id: int,
    user_email: str | None = None,
    user_name: str | None = None,
    message: str = "",
    extra_metadata: dict[str, Any] | None = None,
) -> None:
    """Emit an OCSF Account Change (3002) event."""
    emit(
        _base_event(
            class_uid=EventClass.ACCOUNT_CHANGE,
            activity_id=activity_id,
            activity_name=activity_name,
            status_id=status_id,
            severity_id=severity_id,
            user_email=user_email,
            user_name=user_name,
            message=message,
            extra_metadata=extra_metadata,
        )
    )


def event_for_trigger(trigger_source: str | None) -> TriggerActivity:
    """Map a Cognito triggerSource to an OCSF class and activity."""
    return _TRIGGER_ACTIVITIES.get(trigger_source or "", _OTHER)


def trigger_event(
    cognito_event: dict[str, Any],
    *,
    status_id: int,
    message: str = "",
) -> None:
    """Emit the OCSF event describing a Cognito trigger invocation."""
    trigger_source = cognito_event.get("triggerSource")
    activity = event_for_trigger(trigger_source)
    build = (
        account_change_event
        if activity.class_uid == EventClass.ACCOUNT_CHANGE
        else authentication_event
    )
    build(
        activity_id=activity.activity_id,
        activity_name=activity.activity_name,
        status_id=status_id,
        severity_id=Severity.MEDIUM if status_id != Status.SUCCESS else Severity.INFORMATIONAL,
        user_email=email_from_trigger(cognito_event),
        user_name=cognito_event.get("userName"),
        message=message,
        extra_metadata={
            "trigger_source": trigger_source,
            "user_pool_id": cognito_event.get("userPoolId"),
        },
    )


def email_from_trigger(cognito_event: dict[str, Any]) -> str | None:
    """Extract the user's email from a Cognito trigger event (best-effort)."""
    request = cognito_event.get("request")
    if not isinstance(request, dict):
        return None
    attributes = request.get("userAttributes") or {}
    return attributes.get("email")
