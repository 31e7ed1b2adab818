from sourcegraph_client.client import SourcegraphClient
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.deltas import (
    DefDelta,
    Delta,
    DeltaAffectedPerson,
    DeltaDefs,
    DeltaFiles,
    DeltaKind,
    DiffStat,
    UnitDelta,
    sort_def_deltas,
    sort_unit_deltas,
)
from sourcegraph_client.core.domain.specs import (
    DeltaSpec,
    OrgSpec,
    RepoRevSpec,
    RepoSpec,
    parse_org_spec,
    unmarshal_delta_spec,
)
from sourcegraph_client.core.exceptions import (
    ApiError,
    InvalidSpecError,
    MalformedSpecError,
    SourcegraphError,
)
from sourcegraph_client.infrastructure.configuration import SourcegraphSettings
from sourcegraph_client.infrastructure.observability import configure_logging

__all__ = [
    "ApiError",
    "ApiResponse",
    "DefDelta",
    "Delta",
    "DeltaAffectedPerson",
    "DeltaDefs",
    "DeltaFiles",
    "DeltaKind",
    "DeltaSpec",
    "DiffStat",
    "InvalidSpecError",
    "MalformedSpecError",
    "OrgSpec",
    "RepoRevSpec",
    "RepoSpec",
    "SourcegraphClient",
    "SourcegraphError",
    "SourcegraphSettings",
    "UnitDelta",
    "configure_logging",
    "parse_org_spec",
    "sort_def_deltas",
    "sort_unit_deltas",
    "unmarshal_delta_spec",
]
