from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.deltas.def_delta import DefDelta, sort_def_deltas
from sourcegraph_client.core.domain.deltas.diff_stat import DiffStat
from sourcegraph_client.core.domain.shared import WireModel


class DeltaDefs(WireModel):
    """
    Definitions added/changed/deleted in a delta.

    ``diff_stat`` is the server's figure for the whole file diff. It is not
    subject to pagination and is never recomputed from ``defs``.
    """

    defs: list[DefDelta] = Field(default_factory=list)
    diff_stat: DiffStat = Field(default_factory=DiffStat)

    def sorted(self) -> DeltaDefs:
        return self.model_copy(update={"defs": sort_def_deltas(self.defs)})
