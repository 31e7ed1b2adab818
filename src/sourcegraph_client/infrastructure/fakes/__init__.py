from sourcegraph_client.infrastructure.fakes.fake_deltas_service import FakeDeltasService
from sourcegraph_client.infrastructure.fakes.fake_orgs_service import FakeOrgsService
from sourcegraph_client.infrastructure.fakes.fake_repos_service import FakeReposService

__all__ = ["FakeDeltasService", "FakeOrgsService", "FakeReposService"]
