from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class Def(WireModel):
    """A named program entity (function, type, variable) inside a source unit."""

    repo: str = ""
    commit_id: str = Field(default="", alias="CommitID")
    unit_type: str = ""
    unit: str = ""
    path: str = ""
    name: str = ""
    kind: str = ""
    file: str = ""
    exported: bool = False

    def natural_key(self) -> tuple[str, str, str]:
        return (self.unit_type, self.unit, self.path)
