from __future__ import annotations

from datetime import datetime

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class Signature(WireModel):
    name: str = ""
    email: str = ""
    date: datetime | None = None


class Commit(WireModel):
    id: str = Field(alias="ID")
    message: str = ""
    author: Signature | None = None
    committer: Signature | None = None
    parents: list[str] = Field(default_factory=list)
