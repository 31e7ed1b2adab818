from sourcegraph_client.infrastructure.services.deltas_service import DeltasService
from sourcegraph_client.infrastructure.services.orgs_service import OrgsService
from sourcegraph_client.infrastructure.services.repos_service import ReposService

__all__ = ["DeltasService", "OrgsService", "ReposService"]
