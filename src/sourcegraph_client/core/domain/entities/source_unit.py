from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class SourceUnit(WireModel):
    """A named, typed grouping of source code (a package or module) tracked by the analyzer."""

    type: str
    name: str
    repo: str | None = None
    commit_id: str | None = Field(default=None, alias="CommitID")
    dir: str | None = None
    files: list[str] = Field(default_factory=list)

    def natural_key(self) -> tuple[str, str]:
        return (self.type, self.name)
