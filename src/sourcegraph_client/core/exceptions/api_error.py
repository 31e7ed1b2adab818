from __future__ import annotations

from dataclasses import dataclass, field

from sourcegraph_client.core.exceptions.sourcegraph_error import SourcegraphError


@dataclass(frozen=False, eq=False)
class ApiError(SourcegraphError):
    """Raised for a non-2xx response. Keeps the response metadata for the caller."""

    method: str
    url: str
    status_code: int
    message: str
    headers: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.message} status={self.status_code}"

    @property
    def not_found(self) -> bool:
        return self.status_code == 404
