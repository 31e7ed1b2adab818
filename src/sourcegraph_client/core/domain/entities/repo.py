from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel
from sourcegraph_client.core.domain.specs import RepoSpec


class Repo(WireModel):
    uri: str = Field(alias="URI")
    rid: int = Field(default=0, alias="RID")
    name: str = ""
    description: str = ""
    default_branch: str = ""
    language: str = ""
    html_url: str = Field(default="", alias="HTMLURL")
    fork: bool = False
    private: bool = False
    mirror: bool = False

    def repo_spec(self) -> RepoSpec:
        return RepoSpec(uri=self.uri, rid=self.rid)
