from __future__ import annotations

from pydantic import ConfigDict

from sourcegraph_client.core.domain.shared import WireModel


class DiffStat(WireModel):
    """Added/changed/deleted line counts."""

    model_config = ConfigDict(frozen=True)

    added: int = 0
    changed: int = 0
    deleted: int = 0

    def __add__(self, other: DiffStat) -> DiffStat:
        if not isinstance(other, DiffStat):
            return NotImplemented
        return DiffStat(
            added=self.added + other.added,
            changed=self.changed + other.changed,
            deleted=self.deleted + other.deleted,
        )

    def __radd__(self, other: object) -> DiffStat:
        # Lets sum() start from its default 0.
        if other == 0:
            return self
        return NotImplemented
