from __future__ import annotations

from sourcegraph_client.core.application.options import RepoGetOptions, RepoListOptions
from sourcegraph_client.core.application.ports import ReposPort
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Readme, Repo
from sourcegraph_client.core.domain.specs import RepoRevSpec, RepoSpec
from sourcegraph_client.infrastructure.http import SourcegraphHttpClient
from sourcegraph_client.infrastructure.observability import get_logger
from sourcegraph_client.infrastructure.routing import Route, Router
from sourcegraph_client.infrastructure.services.response_decoder import decode_list, decode_model

logger = get_logger(__name__)


class ReposService(ReposPort):
    def __init__(self, client: SourcegraphHttpClient, router: Router):
        self.client = client
        self.router = router

    def get(self, repo: RepoSpec, opt: RepoGetOptions | None = None) -> ApiResponse[Repo]:
        url = self.router.url(Route.REPO, repo.route_vars())
        logger.info("Fetching repo", http_method="GET", http_route=Route.REPO.value)
        response = self.client.get(url, params=opt.to_query_params() if opt else None)
        return ApiResponse.from_http(decode_model(response, Repo), response)

    def list(self, opt: RepoListOptions | None = None) -> ApiResponse[list[Repo]]:
        url = self.router.url(Route.REPOS)
        logger.info("Listing repos", http_method="GET", http_route=Route.REPOS.value)
        response = self.client.get(url, params=opt.to_query_params() if opt else None)
        return ApiResponse.from_http(decode_list(response, Repo), response)

    def create(self, new_repo: Repo) -> ApiResponse[Repo]:
        url = self.router.url(Route.REPOS_CREATE)
        logger.info("Creating repo", http_method="POST", http_route=Route.REPOS_CREATE.value, uri=new_repo.uri)
        response = self.client.post(url, new_repo.to_wire())
        return ApiResponse.from_http(decode_model(response, Repo), response)

    def get_readme(self, repo: RepoRevSpec) -> ApiResponse[Readme]:
        url = self.router.url(Route.REPO_README, repo.route_vars())
        logger.info("Fetching readme", http_method="GET", http_route=Route.REPO_README.value)
        response = self.client.get(url)
        return ApiResponse.from_http(decode_model(response, Readme), response)
