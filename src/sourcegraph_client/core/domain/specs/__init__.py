from sourcegraph_client.core.domain.specs.delta_spec import DeltaSpec, unmarshal_delta_spec
from sourcegraph_client.core.domain.specs.org_spec import OrgSpec, parse_org_spec
from sourcegraph_client.core.domain.specs.repo_spec import (
    RepoRevSpec,
    RepoSpec,
    parse_repo_spec,
    unmarshal_repo_rev_spec,
    unmarshal_repo_spec,
)

__all__ = [
    "DeltaSpec",
    "OrgSpec",
    "RepoRevSpec",
    "RepoSpec",
    "parse_org_spec",
    "parse_repo_spec",
    "unmarshal_delta_spec",
    "unmarshal_repo_rev_spec",
    "unmarshal_repo_spec",
]
