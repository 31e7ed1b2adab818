from __future__ import annotations

from dataclasses import dataclass

from sourcegraph_client.core.exceptions import InvalidSpecError, MalformedSpecError

UID_PREFIX = "$"


@dataclass(frozen=True)
class OrgSpec:
    """
    Specifies an organization by name or by the uid of the user record backing it.
    The name takes priority when both are set, and the uid is then dropped.
    """

    org: str = ""
    uid: int = 0

    def __post_init__(self) -> None:
        if self.org.startswith(UID_PREFIX):
            raise InvalidSpecError(f"org name {self.org!r} would be read back as a uid")
        if self.org and self.uid:
            object.__setattr__(self, "uid", 0)

    @classmethod
    def by_name(cls, org: str) -> OrgSpec:
        if not org:
            raise InvalidSpecError("OrgSpec name must be non-empty")
        return cls(org=org)

    @classmethod
    def by_uid(cls, uid: int) -> OrgSpec:
        if uid <= 0:
            raise InvalidSpecError(f"OrgSpec uid must be positive, got {uid}")
        return cls(uid=uid)

    def path_component(self) -> str:
        if self.org:
            return self.org
        if self.uid > 0:
            return f"{UID_PREFIX}{self.uid}"
        raise InvalidSpecError("empty OrgSpec: neither org nor uid is set")

    def route_vars(self) -> dict[str, str]:
        return {"OrgSpec": self.path_component()}


def parse_org_spec(path_component: str) -> OrgSpec:
    """Inverse of OrgSpec.path_component()."""
    if path_component.startswith(UID_PREFIX):
        try:
            uid = int(path_component[len(UID_PREFIX):])
        except ValueError as e:
            raise MalformedSpecError(path_component, "org uid is not an integer") from e
        if uid <= 0:
            raise MalformedSpecError(path_component, "org uid must be positive")
        return OrgSpec(uid=uid)
    if not path_component:
        raise MalformedSpecError(path_component, "empty org path component")
    return OrgSpec(org=path_component)
