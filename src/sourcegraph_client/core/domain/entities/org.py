from __future__ import annotations

from pydantic import ConfigDict, Field

from sourcegraph_client.core.domain.shared import WireModel
from sourcegraph_client.core.domain.specs import OrgSpec


class Org(WireModel):
    """An organization, backed by a synthetic user record."""

    uid: int = Field(default=0, alias="UID")
    login: str = ""
    name: str = ""
    avatar_url: str = Field(default="", alias="AvatarURL")
    is_organization: bool = True

    def org_spec(self) -> OrgSpec:
        return OrgSpec(org=self.login, uid=self.uid)


class PlanSettings(WireModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None


class OrgSettings(WireModel):
    plan: PlanSettings | None = None
