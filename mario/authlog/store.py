"""DynamoDB writer for the auth-log table."""

from __future__ import annotations

import logging

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import AuthLogWriteError
from .records import AuthLogRecord

logger = logging.getLogger(__name__)


class AuthLogStore:
    """Append-only auth-log writer using AWS DynamoDB.

    Rows are only ever inserted; nothing here reads, updates or deletes them.
    """

    def __init__(
        self,
        table_name: str = "MarioAuthLog",
        endpoint_url: str = "",
        region_name: str = "us-west-2",
    ) -> None:
        self._table_name = table_name
        self._session = aioboto3.Session()
        self._endpoint_url = endpoint_url or None
        self._region_name = region_name

    @property
    def table_name(self) -> str:
        return self._table_name

    async def put(self, record: AuthLogRecord) -> None:
        """Insert one row. Raises AuthLogWriteError on any SDK failure."""
        try:
            async with self._session.resource(
                "dynamodb",
                endpoint_url=self._endpoint_url,
                region_name=self._region_name,
            ) as dynamodb:
                table = await dynamodb.Table(self._table_name)
                await table.put_item(Item=record.to_item())
        except (BotoCoreError, ClientError) as e:
            raise AuthLogWriteError(self._table_name, str(e)) from e

        logger.debug("Auth log row written: PK=%s SK=%s", record.pk, record.sk)
