from sourcegraph_client.core.exceptions.api_error import ApiError
from sourcegraph_client.core.exceptions.invalid_spec_error import InvalidSpecError
from sourcegraph_client.core.exceptions.malformed_spec_error import MalformedSpecError
from sourcegraph_client.core.exceptions.route_error import RouteError
from sourcegraph_client.core.exceptions.sourcegraph_error import SourcegraphError

__all__ = [
    "ApiError",
    "InvalidSpecError",
    "MalformedSpecError",
    "RouteError",
    "SourcegraphError",
]
