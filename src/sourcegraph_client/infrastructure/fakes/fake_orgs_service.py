from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sourcegraph_client.core.application.ports import OrgsPort
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Org, OrgSettings, Person
from sourcegraph_client.core.domain.specs import OrgSpec


@dataclass
class FakeOrgsService(OrgsPort):
    """In-memory OrgsPort for tests. Settings updates are kept per org path component."""

    get_fn: Callable[[OrgSpec], Org] | None = None
    list_members_fn: Callable[[OrgSpec, Any], list[Person]] | None = None
    settings: dict[str, OrgSettings] = field(default_factory=dict)
    calls: list[tuple[str, OrgSpec]] = field(default_factory=list)

    def get(self, org):
        self.calls.append(("get", org))
        return ApiResponse(self.get_fn(org) if self.get_fn else None)

    def list_members(self, org, opt=None):
        self.calls.append(("list_members", org))
        return ApiResponse(self.list_members_fn(org, opt) if self.list_members_fn else [])

    def get_settings(self, org):
        self.calls.append(("get_settings", org))
        return ApiResponse(self.settings.get(org.path_component(), OrgSettings()))

    def update_settings(self, org, settings):
        self.calls.append(("update_settings", org))
        self.settings[org.path_component()] = settings
        return ApiResponse(None)
