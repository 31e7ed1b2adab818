from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    A decoded result together with the HTTP metadata of the call that produced it.

    Listings are paginated by the server; the paging and total-count details
    travel in ``headers`` rather than in the body.
    """

    value: T
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_http(cls, value: T, response: httpx.Response) -> ApiResponse[T]:
        return cls(value=value, status_code=response.status_code, headers=dict(response.headers))

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        return next((value for key, value in self.headers.items() if key.lower() == wanted), None)
