from sourcegraph_client.core.application.ports.deltas_port import DeltasPort
from sourcegraph_client.core.application.ports.orgs_port import OrgsPort
from sourcegraph_client.core.application.ports.repos_port import ReposPort

__all__ = ["DeltasPort", "OrgsPort", "ReposPort"]
