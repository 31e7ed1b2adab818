from sourcegraph_client.infrastructure.configuration.sourcegraph_settings import SourcegraphSettings

__all__ = ["SourcegraphSettings"]
