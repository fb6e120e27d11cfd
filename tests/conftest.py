"""Shared fixtures for the Mario test suite."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from mario.authlog import trigger
from mario.authlog.records import AuthLogRecord
from mario.config import Settings, override_settings
from mario.exceptions import AuthLogWriteError, SecretLookupError
from mario.main import create_app


# ── Fakes ─────────────────────────────────────────────────────────────────


class FakeSecretStore:
    """Stands in for SecretStore; records every lookup."""

    def __init__(self, value: str | None = '{"password": "hunter2"}', error: Exception | None = None):
        self.value = value
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def get_secret(self, secret_id: str, version_stage: str = "AWSCURRENT") -> str | None:
        self.calls.append((secret_id, version_stage))
        if self.error is not None:
            raise self.error
        return self.value


class FakeAuthLogStore:
    """Stands in for AuthLogStore; keeps written records in memory."""

    table_name = "test_authlog"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.records: list[AuthLogRecord] = []

    async def put(self, record: AuthLogRecord) -> None:
        if self.fail:
            raise AuthLogWriteError(self.table_name, "ProvisionedThroughputExceededException")
        self.records.append(record)


# ── Test Settings ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def test_settings() -> Settings:
    s = Settings(
        aws_region="ap-south-1",
        default_secret_name="mario/defaultSecret",
        secret_version_stage="AWSCURRENT",
        authlog_tablename="test_authlog",
    )
    override_settings(s)
    trigger.reset_for_testing()
    yield s
    override_settings(None)
    trigger.reset_for_testing()


# ── App & Client ──────────────────────────────────────────────────────────


@pytest.fixture
def secret_store() -> FakeSecretStore:
    return FakeSecretStore()


@pytest.fixture
def failing_secret_store() -> FakeSecretStore:
    return FakeSecretStore(
        error=SecretLookupError(
            "mario/defaultSecret",
            "An error occurred (AccessDeniedException) when calling the GetSecretValue operation",
        )
    )


@pytest.fixture
def app(secret_store):
    return create_app(secret_store=secret_store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_log_store() -> FakeAuthLogStore:
    return FakeAuthLogStore()


@pytest.fixture
def failing_auth_log_store() -> FakeAuthLogStore:
    return FakeAuthLogStore(fail=True)


# ── Events ────────────────────────────────────────────────────────────────


@pytest.fixture
def http_api_event() -> dict[str, Any]:
    """API Gateway v2 (HTTP API) event for GET /secret/abc."""
    return {
        "version": "2.0",
        "routeKey": "GET /secret/{id}",
        "rawPath": "/secret/abc",
        "rawQueryString": "",
        "headers": {
            "accept": "*/*",
            "host": "abc123.execute-api.ap-south-1.amazonaws.com",
            "user-agent": "curl/8.5.0",
            "x-forwarded-port": "443",
            "x-forwarded-proto": "https",
        },
        "pathParameters": {"id": "abc"},
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "abc123",
            "domainName": "abc123.execute-api.ap-south-1.amazonaws.com",
            "http": {
                "method": "GET",
                "path": "/secret/abc",
                "protocol": "HTTP/1.1",
                "sourceIp": "203.0.113.7",
                "userAgent": "curl/8.5.0",
            },
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "routeKey": "GET /secret/{id}",
            "stage": "$default",
            "time": "19/Oct/2026:08:15:00 +0000",
            "timeEpoch": 1792397700000,
        },
        "isBase64Encoded": False,
    }


def _cognito_event(trigger_source: str) -> dict[str, Any]:
    return {
        "version": "1",
        "region": "ap-south-1",
        "userPoolId": "ap-south-1_AbCdEf123",
        "userName": "7f3c1e2a-1111-2222-3333-444455556666",
        "callerContext": {
            "awsSdkVersion": "aws-sdk-unknown-unknown",
            "clientId": "1example23456789",
        },
        "triggerSource": trigger_source,
        "request": {
            "userAttributes": {
                "sub": "7f3c1e2a-1111-2222-3333-444455556666",
                "email": "mario@example.com",
                "email_verified": "true",
                "name": "Mario Rossi",
                "cognito:user_status": "CONFIRMED",
            },
            "newDeviceUsed": False,
        },
        "response": {},
    }


@pytest.fixture
def post_auth_event() -> dict[str, Any]:
    return _cognito_event("PostAuthentication_Authentication")


@pytest.fixture
def post_confirmation_event() -> dict[str, Any]:
    return _cognito_event("PostConfirmation_ConfirmSignUp")
