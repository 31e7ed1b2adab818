from sourcegraph_client.core.exceptions.sourcegraph_error import SourcegraphError


class RouteError(SourcegraphError):
    """Raised when a URL cannot be rendered for a named route."""
