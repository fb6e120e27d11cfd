"""Auth-log table rows."""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"  # RFC 3339, UTC, second precision


class AuthLogRecord(BaseModel):
    """One row of the auth-log table.

    Table schema:
        Partition key: PK (S), random UUID
        Sort key: SK (S), RFC 3339 timestamp
        Attributes: Data (S, the triggering event as JSON)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pk: str = Field(alias="PK")
    sk: str = Field(alias="SK")
    data: str = Field(alias="Data")

    @classmethod
    def from_event(
        cls,
        event: Any,
        *,
        now: datetime | None = None,
        record_id: str | None = None,
    ) -> AuthLogRecord:
        now = now or datetime.now(timezone.utc)
        return cls(
            pk=record_id or str(uuid.uuid4()),
            sk=now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT),
            data=json.dumps(event),
        )

    def to_item(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
