from __future__ import annotations

from pydantic import Field

from sourcegraph_client.core.domain.deltas.diff_stat import DiffStat
from sourcegraph_client.core.domain.deltas.file_diff import FileDiff
from sourcegraph_client.core.domain.shared import WireModel


class DeltaFiles(WireModel):
    file_diffs: list[FileDiff] = Field(default_factory=list)

    def diff_stat(self) -> DiffStat:
        """Sum of every file's own diffstat."""
        return sum((fd.stat() for fd in self.file_diffs), DiffStat())
