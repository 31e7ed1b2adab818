from sourcegraph_client.core.domain.deltas.def_delta import DefDelta, sort_def_deltas
from sourcegraph_client.core.domain.deltas.delta import Delta
from sourcegraph_client.core.domain.deltas.delta_affected_person import DeltaAffectedPerson
from sourcegraph_client.core.domain.deltas.delta_defs import DeltaDefs
from sourcegraph_client.core.domain.deltas.delta_files import DeltaFiles
from sourcegraph_client.core.domain.deltas.delta_kind import DeltaKind
from sourcegraph_client.core.domain.deltas.diff_stat import DiffStat
from sourcegraph_client.core.domain.deltas.file_diff import FileDiff, Hunk
from sourcegraph_client.core.domain.deltas.unit_delta import UnitDelta, sort_unit_deltas

__all__ = [
    "DefDelta",
    "Delta",
    "DeltaAffectedPerson",
    "DeltaDefs",
    "DeltaFiles",
    "DeltaKind",
    "DiffStat",
    "FileDiff",
    "Hunk",
    "UnitDelta",
    "sort_def_deltas",
    "sort_unit_deltas",
]
