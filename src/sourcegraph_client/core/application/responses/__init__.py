from sourcegraph_client.core.application.responses.api_response import ApiResponse

__all__ = ["ApiResponse"]
