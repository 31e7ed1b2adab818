from __future__ import annotations

from abc import ABC, abstractmethod

from sourcegraph_client.core.application.options import (
    DeltaGetOptions,
    DeltaListAffectedAuthorsOptions,
    DeltaListAffectedClientsOptions,
    DeltaListDefsOptions,
    DeltaListFilesOptions,
    DeltaListUnitsOptions,
)
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.deltas import (
    Delta,
    DeltaAffectedPerson,
    DeltaDefs,
    DeltaFiles,
    UnitDelta,
)
from sourcegraph_client.core.domain.specs import DeltaSpec


class DeltasPort(ABC):
    """
    Delta-related endpoints. A delta is every change between two commits,
    possibly from two different repositories: file diffs, definition-level
    diffs and the people affected by them.
    """

    @abstractmethod
    def get(self, ds: DeltaSpec, opt: DeltaGetOptions | None = None) -> ApiResponse[Delta]:
        """Fetches a summary of a delta."""
        pass

    @abstractmethod
    def list_units(
        self, ds: DeltaSpec, opt: DeltaListUnitsOptions | None = None
    ) -> ApiResponse[list[UnitDelta]]:
        """Lists units added/changed/deleted in a delta."""
        pass

    @abstractmethod
    def list_defs(self, ds: DeltaSpec, opt: DeltaListDefsOptions | None = None) -> ApiResponse[DeltaDefs]:
        """Lists definitions added/changed/deleted in a delta."""
        pass

    @abstractmethod
    def list_files(self, ds: DeltaSpec, opt: DeltaListFilesOptions | None = None) -> ApiResponse[DeltaFiles]:
        """Fetches the file diff for a delta."""
        pass

    @abstractmethod
    def list_affected_authors(
        self, ds: DeltaSpec, opt: DeltaListAffectedAuthorsOptions | None = None
    ) -> ApiResponse[list[DeltaAffectedPerson]]:
        """Lists authors whose code is added/deleted/changed in a delta."""
        pass

    @abstractmethod
    def list_affected_clients(
        self, ds: DeltaSpec, opt: DeltaListAffectedClientsOptions | None = None
    ) -> ApiResponse[list[DeltaAffectedPerson]]:
        """Lists clients whose code is affected by a delta."""
        pass
