from __future__ import annotations

from sourcegraph_client.core.application.options import (
    DeltaGetOptions,
    DeltaListAffectedAuthorsOptions,
    DeltaListAffectedClientsOptions,
    DeltaListDefsOptions,
    DeltaListFilesOptions,
    DeltaListUnitsOptions,
    QueryOptions,
)
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
from sourcegraph_client.infrastructure.http import SourcegraphHttpClient
from sourcegraph_client.infrastructure.observability import get_logger
from sourcegraph_client.infrastructure.routing import Route, Router
from sourcegraph_client.infrastructure.services.response_decoder import decode_list, decode_model

logger = get_logger(__name__)


class DeltasService(DeltasPort):
    def __init__(self, client: SourcegraphHttpClient, router: Router):
        self.client = client
        self.router = router

    def get(self, ds: DeltaSpec, opt: DeltaGetOptions | None = None) -> ApiResponse[Delta]:
        response = self._get(Route.DELTA, ds, opt)
        return ApiResponse.from_http(decode_model(response, Delta), response)

    def list_units(
        self, ds: DeltaSpec, opt: DeltaListUnitsOptions | None = None
    ) -> ApiResponse[list[UnitDelta]]:
        response = self._get(Route.DELTA_UNITS, ds, opt)
        return ApiResponse.from_http(decode_list(response, UnitDelta), response)

    def list_defs(self, ds: DeltaSpec, opt: DeltaListDefsOptions | None = None) -> ApiResponse[DeltaDefs]:
        response = self._get(Route.DELTA_DEFS, ds, opt)
        return ApiResponse.from_http(decode_model(response, DeltaDefs), response)

    def list_files(self, ds: DeltaSpec, opt: DeltaListFilesOptions | None = None) -> ApiResponse[DeltaFiles]:
        response = self._get(Route.DELTA_FILES, ds, opt)
        return ApiResponse.from_http(decode_model(response, DeltaFiles), response)

    def list_affected_authors(
        self, ds: DeltaSpec, opt: DeltaListAffectedAuthorsOptions | None = None
    ) -> ApiResponse[list[DeltaAffectedPerson]]:
        response = self._get(Route.DELTA_AFFECTED_AUTHORS, ds, opt)
        return ApiResponse.from_http(decode_list(response, DeltaAffectedPerson), response)

    def list_affected_clients(
        self, ds: DeltaSpec, opt: DeltaListAffectedClientsOptions | None = None
    ) -> ApiResponse[list[DeltaAffectedPerson]]:
        response = self._get(Route.DELTA_AFFECTED_CLIENTS, ds, opt)
        return ApiResponse.from_http(decode_list(response, DeltaAffectedPerson), response)

    def _get(self, route: Route, ds: DeltaSpec, opt: QueryOptions | None):
        url = self.router.url(route, ds.route_vars())
        logger.info(
            "Fetching delta resource",
            http_method="GET",
            http_route=route.value,
            cross_repo=ds.is_cross_repo,
        )
        return self.client.get(url, params=opt.to_query_params() if opt else None)
