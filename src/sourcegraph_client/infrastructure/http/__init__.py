from sourcegraph_client.infrastructure.http.sourcegraph_http_client import SourcegraphHttpClient

__all__ = ["SourcegraphHttpClient"]
