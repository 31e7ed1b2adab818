from __future__ import annotations

from typing import Any

from pydantic import Field

from sourcegraph_client.core.domain.shared import WireModel


class QueryOptions(WireModel):
    """Options sent as URL query parameters. Unset values are left out."""

    def to_query_params(self) -> dict[str, Any]:
        params = self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_defaults=True)
        return {key: _format_param(value) for key, value in params.items()}


def _format_param(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class ListOptions(QueryOptions):
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
