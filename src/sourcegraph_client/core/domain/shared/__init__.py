from sourcegraph_client.core.domain.shared.wire_model import WireModel

__all__ = ["WireModel"]
