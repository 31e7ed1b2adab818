from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sourcegraph_client.core.application.ports import DeltasPort
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.deltas import (
    Delta,
    DeltaAffectedPerson,
    DeltaDefs,
    DeltaFiles,
    UnitDelta,
)
from sourcegraph_client.core.domain.specs import DeltaSpec


@dataclass
class FakeDeltasService(DeltasPort):
    """
    In-memory DeltasPort for tests. Each operation delegates to the matching
    ``*_fn`` callable and wraps its result in an ApiResponse. When the callable
    is unset, ``get`` yields a ``None`` value and listings yield empty results.
    Every call is recorded in ``calls`` as ``(operation, spec, options)``.
    """

    get_fn: Callable[[DeltaSpec, Any], Delta] | None = None
    list_units_fn: Callable[[DeltaSpec, Any], list[UnitDelta]] | None = None
    list_defs_fn: Callable[[DeltaSpec, Any], DeltaDefs] | None = None
    list_files_fn: Callable[[DeltaSpec, Any], DeltaFiles] | None = None
    list_affected_authors_fn: Callable[[DeltaSpec, Any], list[DeltaAffectedPerson]] | None = None
    list_affected_clients_fn: Callable[[DeltaSpec, Any], list[DeltaAffectedPerson]] | None = None
    calls: list[tuple[str, DeltaSpec, Any]] = field(default_factory=list)

    def get(self, ds, opt=None):
        self.calls.append(("get", ds, opt))
        return ApiResponse(self.get_fn(ds, opt) if self.get_fn else None)

    def list_units(self, ds, opt=None):
        self.calls.append(("list_units", ds, opt))
        return ApiResponse(self.list_units_fn(ds, opt) if self.list_units_fn else [])

    def list_defs(self, ds, opt=None):
        self.calls.append(("list_defs", ds, opt))
        return ApiResponse(self.list_defs_fn(ds, opt) if self.list_defs_fn else DeltaDefs())

    def list_files(self, ds, opt=None):
        self.calls.append(("list_files", ds, opt))
        return ApiResponse(self.list_files_fn(ds, opt) if self.list_files_fn else DeltaFiles())

    def list_affected_authors(self, ds, opt=None):
        self.calls.append(("list_affected_authors", ds, opt))
        return ApiResponse(self.list_affected_authors_fn(ds, opt) if self.list_affected_authors_fn else [])

    def list_affected_clients(self, ds, opt=None):
        self.calls.append(("list_affected_clients", ds, opt))
        return ApiResponse(self.list_affected_clients_fn(ds, opt) if self.list_affected_clients_fn else [])
