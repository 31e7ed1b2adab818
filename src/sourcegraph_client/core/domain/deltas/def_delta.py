from __future__ import annotations

from collections.abc import Iterable

from sourcegraph_client.core.domain.deltas.entity_delta import EntityDelta, sort_deltas
from sourcegraph_client.core.domain.entities import Def


class DefDelta(EntityDelta[Def]):
    """A definition added, changed or deleted between base and head."""


def sort_def_deltas(deltas: Iterable[DefDelta]) -> list[DefDelta]:
    return sort_deltas(deltas)
