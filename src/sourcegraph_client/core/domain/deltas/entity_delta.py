"""Base/head pairs of source units or definitions and their listing order."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import model_validator

from sourcegraph_client.core.domain.deltas.delta_kind import DeltaKind
from sourcegraph_client.core.domain.entities import Def, SourceUnit
from sourcegraph_client.core.domain.shared import WireModel

EntityT = TypeVar("EntityT", SourceUnit, Def)
DeltaT = TypeVar("DeltaT", bound="EntityDelta")


class EntityDelta(WireModel, Generic[EntityT]):
    """
    One entity as it exists in the base and head revisions.

    A missing base means the entity was added in the head; a missing head means
    it was deleted. Both missing is rejected at validation time.
    """

    base: EntityT | None = None
    head: EntityT | None = None

    @model_validator(mode="after")
    def require_one_side(self) -> EntityDelta:
        if self.base is None and self.head is None:
            raise ValueError(f"{type(self).__name__} needs a base or a head")
        return self

    @property
    def kind(self) -> DeltaKind:
        if self.base is None:
            return DeltaKind.ADDED
        if self.head is None:
            return DeltaKind.DELETED
        return DeltaKind.CHANGED

    @property
    def added(self) -> bool:
        return self.kind is DeltaKind.ADDED

    @property
    def changed(self) -> bool:
        return self.kind is DeltaKind.CHANGED

    @property
    def deleted(self) -> bool:
        return self.kind is DeltaKind.DELETED

    def sort_key(self) -> tuple[int, tuple[str, ...]]:
        kind = self.kind
        entity = self.base if kind is DeltaKind.DELETED else self.head
        return (kind.sort_rank, entity.natural_key())


def sort_deltas(deltas: Iterable[DeltaT]) -> list[DeltaT]:
    """Returns a new list: added, then changed, then deleted, each by natural key.

    The sort is stable, so records with equal keys keep their input order.
    """
    return sorted(deltas, key=lambda delta: delta.sort_key())
