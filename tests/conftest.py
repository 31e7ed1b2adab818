import pytest

from sourcegraph_client.core.domain.specs import DeltaSpec, RepoRevSpec, RepoSpec
from sourcegraph_client.infrastructure.configuration import SourcegraphSettings

BASE_URL = "https://sourcegraph.example.com/api/"


@pytest.fixture
def settings():
    return SourcegraphSettings(base_url=BASE_URL, token="mock_sg_token", timeout=5.0)


@pytest.fixture
def same_repo_delta():
    repo = RepoSpec(uri="github.com/acme/widgets")
    return DeltaSpec(
        base=RepoRevSpec(repo=repo, rev="main"),
        head=RepoRevSpec(repo=repo, rev="feature/login"),
    )


@pytest.fixture
def cross_repo_delta():
    return DeltaSpec(
        base=RepoRevSpec(repo=RepoSpec(uri="github.com/acme/widgets"), rev="main"),
        head=RepoRevSpec(repo=RepoSpec(uri="github.com/other/fork"), rev="patch-1"),
    )
