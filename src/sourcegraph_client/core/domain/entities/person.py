from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class Person(WireModel):
    """A registered user or a bare committer identity."""

    uid: int = Field(default=0, alias="UID")
    login: str = ""
    email: str = ""
    full_name: str = ""
    avatar_url: str = Field(default="", alias="AvatarURL")
