from __future__ import annotations

from sourcegraph_client.core.exceptions.sourcegraph_error import SourcegraphError


class MalformedSpecError(SourcegraphError, ValueError):
    """Raised when a route variable or path component cannot be decoded into a spec."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"malformed spec {value!r}: {reason}")
        self.value = value
        self.reason = reason
