from __future__ import annotations

import httpx

from sourcegraph_client.infrastructure.configuration import SourcegraphSettings
from sourcegraph_client.infrastructure.http import SourcegraphHttpClient
from sourcegraph_client.infrastructure.routing import Router
from sourcegraph_client.infrastructure.services import DeltasService, OrgsService, ReposService


class SourcegraphClient:
    """
    Entry point: wires settings, transport and router into the API services.

    Example:
        client = SourcegraphClient()
        ds = DeltaSpec(base=RepoRevSpec(RepoSpec(uri="github.com/a/b"), "main"),
                       head=RepoRevSpec(RepoSpec(uri="github.com/a/b"), "feature"))
        defs = client.deltas.list_defs(ds).value.sorted()
    """

    def __init__(
        self,
        settings: SourcegraphSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or SourcegraphSettings()
        self.http_client = SourcegraphHttpClient(self.settings, transport=transport)
        self.router = Router(self.settings.base_url)

        self.deltas = DeltasService(self.http_client, self.router)
        self.orgs = OrgsService(self.http_client, self.router)
        self.repos = ReposService(self.http_client, self.router)
