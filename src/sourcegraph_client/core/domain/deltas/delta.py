from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, PlainValidator

from sourcegraph_client.core.domain.entities import Build, Commit, Repo
from sourcegraph_client.core.domain.shared import WireModel
from sourcegraph_client.core.domain.specs import DeltaSpec, RepoRevSpec


def _to_repo_rev_spec(value: Any) -> RepoRevSpec:
    if isinstance(value, RepoRevSpec):
        return value
    if isinstance(value, dict):
        return RepoRevSpec.from_payload(value)
    raise ValueError(f"cannot build a RepoRevSpec from {type(value).__name__}")


RepoRevSpecField = Annotated[RepoRevSpec, PlainValidator(_to_repo_rev_spec)]


class Delta(WireModel):
    """The difference between two commits, possibly in two separate repositories."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    base: RepoRevSpecField
    head: RepoRevSpecField
    base_commit: Commit | None = None
    head_commit: Commit | None = None
    base_repo: Repo | None = None
    head_repo: Repo | None = None
    base_build: Build | None = None
    head_build: Build | None = None

    def delta_spec(self) -> DeltaSpec:
        return DeltaSpec(base=self.base, head=self.head)

    @property
    def builds_known(self) -> bool:
        """False when either build is missing, i.e. build success cannot be determined."""
        return self.base_build is not None and self.head_build is not None

    def base_and_head_builds_successful(self) -> bool:
        return self.builds_known and self.base_build.success and self.head_build.success
