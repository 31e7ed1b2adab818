from __future__ import annotations

from abc import ABC, abstractmethod

from sourcegraph_client.core.application.options import RepoGetOptions, RepoListOptions
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Readme, Repo
from sourcegraph_client.core.domain.specs import RepoRevSpec, RepoSpec


class ReposPort(ABC):

    @abstractmethod
    def get(self, repo: RepoSpec, opt: RepoGetOptions | None = None) -> ApiResponse[Repo]:
        pass

    @abstractmethod
    def list(self, opt: RepoListOptions | None = None) -> ApiResponse[list[Repo]]:
        pass

    @abstractmethod
    def create(self, new_repo: Repo) -> ApiResponse[Repo]:
        pass

    @abstractmethod
    def get_readme(self, repo: RepoRevSpec) -> ApiResponse[Readme]:
        """Fetches the formatted README file for a repository revision."""
        pass
