from sourcegraph_client.infrastructure.observability.logging.request_schema_processor import (
    request_schema_processor,
)

__all__ = ["request_schema_processor"]
