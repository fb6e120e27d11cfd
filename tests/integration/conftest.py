"""Shared fixtures for integration tests against a deployed MarioCdkStack.

All integration tests are skipped unless the required environment variables
are set. This allows the test suite to run in CI without credentials while
supporting local testing against a real deployment.

Env vars:
    MARIO_API_URL           — TestApiUrl stack output
    MARIO_AUTHLOG_TABLE     — AuthLogTableName stack output
    AWS_REGION              — region of the deployment
"""

from __future__ import annotations

import os

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def api_url():
    url = os.environ.get("MARIO_API_URL")
    if not url:
        pytest.skip("Integration tests require MARIO_API_URL")
    return url.rstrip("/")


@pytest.fixture(scope="session")
def authlog_table():
    table = os.environ.get("MARIO_AUTHLOG_TABLE")
    if not table:
        pytest.skip("Integration tests require MARIO_AUTHLOG_TABLE")
    return table


@pytest.fixture(scope="session")
def aws_region():
    return os.environ.get("AWS_REGION", "us-west-2")
