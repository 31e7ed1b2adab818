from sourcegraph_client.core.domain.entities.build import Build
from sourcegraph_client.core.domain.entities.commit import Commit, Signature
from sourcegraph_client.core.domain.entities.definition import Def
from sourcegraph_client.core.domain.entities.org import Org, OrgSettings, PlanSettings
from sourcegraph_client.core.domain.entities.person import Person
from sourcegraph_client.core.domain.entities.readme import Readme
from sourcegraph_client.core.domain.entities.repo import Repo
from sourcegraph_client.core.domain.entities.source_unit import SourceUnit

__all__ = [
    "Build",
    "Commit",
    "Def",
    "Org",
    "OrgSettings",
    "Person",
    "PlanSettings",
    "Readme",
    "Repo",
    "Signature",
    "SourceUnit",
]
