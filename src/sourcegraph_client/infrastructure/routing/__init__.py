from sourcegraph_client.infrastructure.routing.router import ROUTE_TEMPLATES, Route, Router

__all__ = ["ROUTE_TEMPLATES", "Route", "Router"]
