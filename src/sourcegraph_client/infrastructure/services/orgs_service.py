from __future__ import annotations

from sourcegraph_client.core.application.options import OrgListMembersOptions
from sourcegraph_client.core.application.ports import OrgsPort
from sourcegraph_client.core.application.responses import ApiResponse
from sourcegraph_client.core.domain.entities import Org, OrgSettings, Person
from sourcegraph_client.core.domain.specs import OrgSpec
from sourcegraph_client.infrastructure.http import SourcegraphHttpClient
from sourcegraph_client.infrastructure.observability import get_logger
from sourcegraph_client.infrastructure.routing import Route, Router
from sourcegraph_client.infrastructure.services.response_decoder import decode_list, decode_model

logger = get_logger(__name__)


class OrgsService(OrgsPort):
    def __init__(self, client: SourcegraphHttpClient, router: Router):
        self.client = client
        self.router = router

    def get(self, org: OrgSpec) -> ApiResponse[Org]:
        url = self.router.url(Route.ORG, org.route_vars())
        logger.info("Fetching org", http_method="GET", http_route=Route.ORG.value)
        response = self.client.get(url)
        return ApiResponse.from_http(decode_model(response, Org), response)

    def list_members(
        self, org: OrgSpec, opt: OrgListMembersOptions | None = None
    ) -> ApiResponse[list[Person]]:
        url = self.router.url(Route.ORG_MEMBERS, org.route_vars())
        logger.info("Listing org members", http_method="GET", http_route=Route.ORG_MEMBERS.value)
        response = self.client.get(url, params=opt.to_query_params() if opt else None)
        return ApiResponse.from_http(decode_list(response, Person), response)

    def get_settings(self, org: OrgSpec) -> ApiResponse[OrgSettings]:
        url = self.router.url(Route.ORG_SETTINGS, org.route_vars())
        logger.info("Fetching org settings", http_method="GET", http_route=Route.ORG_SETTINGS.value)
        response = self.client.get(url)
        return ApiResponse.from_http(decode_model(response, OrgSettings), response)

    def update_settings(self, org: OrgSpec, settings: OrgSettings) -> ApiResponse[None]:
        url = self.router.url(Route.ORG_SETTINGS_UPDATE, org.route_vars())
        logger.info(
            "Updating org settings",
            http_method="PUT",
            http_route=Route.ORG_SETTINGS_UPDATE.value,
        )
        return ApiResponse.from_http(None, self.client.put(url, settings.to_wire()))
