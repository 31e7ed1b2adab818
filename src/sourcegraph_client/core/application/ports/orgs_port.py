from __future__ import annotations

from abc import ABC, abstractmethod

from sourcegraph_client.core.application.options import OrgListMembersOptions
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Org, OrgSettings, Person
from sourcegraph_client.core.domain.specs import OrgSpec


class OrgsPort(ABC):
    """Organization endpoints."""

    @abstractmethod
    def get(self, org: OrgSpec) -> ApiResponse[Org]:
        pass

    @abstractmethod
    def list_members(
        self, org: OrgSpec, opt: OrgListMembersOptions | None = None
    ) -> ApiResponse[list[Person]]:
        pass

    @abstractmethod
    def get_settings(self, org: OrgSpec) -> ApiResponse[OrgSettings]:
        """Fetches an org's configuration settings."""
        pass

    @abstractmethod
    def update_settings(self, org: OrgSpec, settings: OrgSettings) -> ApiResponse[None]:
        pass
