"""Named API routes and URL rendering from route variables."""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping
from enum import Enum

from sourcegraph_client.core.exceptions import RouteError

# Characters kept verbatim inside a route variable. Repository URIs and
# revisions may span several path segments.
_SAFE_CHARS = "/@:$=~"


class Route(str, Enum):
    DELTA = "delta"
    DELTA_UNITS = "delta.units"
    DELTA_DEFS = "delta.defs"
    DELTA_FILES = "delta.files"
    DELTA_AFFECTED_AUTHORS = "delta.affected-authors"
    DELTA_AFFECTED_CLIENTS = "delta.affected-clients"
    ORG = "org"
    ORG_MEMBERS = "org.members"
    ORG_SETTINGS = "org.settings"
    ORG_SETTINGS_UPDATE = "org.settings.update"
    REPO = "repo"
    REPOS = "repos"
    REPOS_CREATE = "repos.create"
    REPO_README = "repo.readme"


_DELTA = "repos/{RepoSpec}@{Rev}/.delta/{DeltaHeadRev}"

ROUTE_TEMPLATES: dict[Route, str] = {
    Route.DELTA: _DELTA,
    Route.DELTA_UNITS: f"{_DELTA}/.units",
    Route.DELTA_DEFS: f"{_DELTA}/.defs",
    Route.DELTA_FILES: f"{_DELTA}/.files",
    Route.DELTA_AFFECTED_AUTHORS: f"{_DELTA}/.affected-authors",
    Route.DELTA_AFFECTED_CLIENTS: f"{_DELTA}/.affected-clients",
    Route.ORG: "orgs/{OrgSpec}",
    Route.ORG_MEMBERS: "orgs/{OrgSpec}/members",
    Route.ORG_SETTINGS: "orgs/{OrgSpec}/settings",
    Route.ORG_SETTINGS_UPDATE: "orgs/{OrgSpec}/settings",
    Route.REPO: "repos/{RepoSpec}",
    Route.REPOS: "repos",
    Route.REPOS_CREATE: "repos",
    Route.REPO_README: "repos/{RepoSpec}@{Rev}/.readme",
}


class Router:
    def __init__(self, base_url: str):
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    def path(self, route: Route, route_vars: Mapping[str, str] | None = None) -> str:
        template = ROUTE_TEMPLATES.get(route)
        if template is None:
            raise RouteError(f"unknown route {route!r}")
        escaped = {
            name: urllib.parse.quote(value, safe=_SAFE_CHARS)
            for name, value in (route_vars or {}).items()
        }
        try:
            return template.format_map(escaped)
        except KeyError as e:
            raise RouteError(f"route {route.value} needs route variable {e.args[0]}") from e

    def url(self, route: Route, route_vars: Mapping[str, str] | None = None) -> str:
        return f"{self.base_url}{self.path(route, route_vars)}"
