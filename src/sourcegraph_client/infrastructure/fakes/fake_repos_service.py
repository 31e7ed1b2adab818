from __future__ import annotations

from dataclasses import dataclass, field

from sourcegraph_client.core.application.ports import ReposPort
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Readme, Repo


@dataclass
class FakeReposService(ReposPort):
    """In-memory ReposPort for tests, keyed by repository path component."""

    repos: dict[str, Repo] = field(default_factory=dict)
    readmes: dict[str, Readme] = field(default_factory=dict)

    def get(self, repo, opt=None):
        try:
            return ApiResponse(self.repos[repo.path_component()])
        except KeyError as e:
            raise LookupError(f"repo {repo.path_component()} not found") from e

    def list(self, opt=None):
        return ApiResponse(list(self.repos.values()))

    def create(self, new_repo):
        self.repos[new_repo.repo_spec().path_component()] = new_repo
        return ApiResponse(new_repo, status_code=201)

    def get_readme(self, repo):
        try:
            return ApiResponse(self.readmes[repo.repo.path_component()])
        except KeyError as e:
            raise LookupError(f"no readme for {repo.repo.path_component()}") from e
