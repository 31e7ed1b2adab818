"""Structlog processor that nests HTTP request fields under a ``request`` block.

Call sites log flat keys (``http_method``, ``http_route``, ``http_url``,
``http_status``, ``duration_ms``); this groups them so renderers print one
coherent object.
"""

from __future__ import annotations

from typing import Any

_REQUEST_FIELDS = {
    "http_method": "method",
    "http_route": "route",
    "http_url": "url",
    "http_status": "status",
    "duration_ms": "duration_ms",
}


def request_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    request = {
        target: event_dict.pop(source)
        for source, target in _REQUEST_FIELDS.items()
        if source in event_dict
    }
    if request:
        event_dict["request"] = request
    return event_dict
