from __future__ import annotations

from collections.abc import Iterable

from sourcegraph_client.core.domain.deltas.entity_delta import EntityDelta, sort_deltas
from sourcegraph_client.core.domain.entities import SourceUnit


class UnitDelta(EntityDelta[SourceUnit]):
    """A source unit added, changed or deleted between base and head."""


def sort_unit_deltas(deltas: Iterable[UnitDelta]) -> list[UnitDelta]:
    return sort_deltas(deltas)
