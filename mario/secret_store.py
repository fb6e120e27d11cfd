"""Secrets Manager access for the secret-check endpoint."""

from __future__ import annotations

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import SecretLookupError


class SecretStore:
    """Reads secret values from AWS Secrets Manager.

    One aioboto3 session is kept per store so it is reused across warm
    Lambda invocations; each lookup opens its own client.
    """

    def __init__(
        self,
        endpoint_url: str = "",
        region_name: str = "us-west-2",
    ) -> None:
        self._session = aioboto3.Session()
        self._endpoint_url = endpoint_url or None
        self._region_name = region_name

    async def get_secret(
        self, secret_id: str, version_stage: str = "AWSCURRENT"
    ) -> str | None:
        """Return the SecretString of ``secret_id`` at ``version_stage``.

        Raises SecretLookupError on any SDK failure.
        """
        try:
            async with self._session.client(
                "secretsmanager",
                endpoint_url=self._endpoint_url,
                region_name=self._region_name,
            ) as client:
                response = await client.get_secret_value(
                    SecretId=secret_id,
                    VersionStage=version_stage,
                )
        except (BotoCoreError, ClientError) as e:
            raise SecretLookupError(secret_id, str(e)) from e

        return response.get("SecretString")
