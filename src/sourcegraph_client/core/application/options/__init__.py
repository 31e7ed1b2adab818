from sourcegraph_client.core.application.options.delta_options import (
    DeltaFilter,
    DeltaGetOptions,
    DeltaListAffectedAuthorsOptions,
    DeltaListAffectedClientsOptions,
    DeltaListDefsOptions,
    DeltaListFilesOptions,
    DeltaListUnitsOptions,
)
from sourcegraph_client.core.application.options.list_options import ListOptions, QueryOptions
from sourcegraph_client.core.application.options.org_options import OrgListMembersOptions
from sourcegraph_client.core.application.options.repo_options import (
    RepoGetOptions,
    RepoListOptions,
    SortDirection,
)

__all__ = [
    "DeltaFilter",
    "DeltaGetOptions",
    "DeltaListAffectedAuthorsOptions",
    "DeltaListAffectedClientsOptions",
    "DeltaListDefsOptions",
    "DeltaListFilesOptions",
    "DeltaListUnitsOptions",
    "ListOptions",
    "OrgListMembersOptions",
    "QueryOptions",
    "RepoGetOptions",
    "RepoListOptions",
    "SortDirection",
]
