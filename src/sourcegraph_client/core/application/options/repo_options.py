from __future__ import annotations

from enum import Enum

from pydantic import Field

from sourcegraph_client.core.application.options.list_options import ListOptions, QueryOptions


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class RepoGetOptions(QueryOptions):
    pass


class RepoListOptions(ListOptions):
    name: str = ""
    query: str = ""
    uris: list[str] = Field(default_factory=list, alias="URIs")
    sort: str = ""
    direction: SortDirection | None = None
    no_fork: bool = False
    owner: str = ""
