from __future__ import annotations

from datetime import datetime

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class Build(WireModel):
    bid: int = Field(default=0, alias="BID")
    repo: str = ""
    commit_id: str = Field(default="", alias="CommitID")
    started_at: datetime | None = None
    ended_at: datetime | None = None
    success: bool = False
    failure: bool = False
