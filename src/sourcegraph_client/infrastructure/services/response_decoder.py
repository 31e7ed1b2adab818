"""Typed decoding of JSON response bodies. Validation errors propagate unchanged."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_model(response: httpx.Response, target: type[T]) -> T:
    return _adapter(target).validate_python(response.json())


def decode_list(response: httpx.Response, item_type: type[T]) -> list[T]:
    # The API encodes an empty listing as JSON null.
    payload = response.json() if response.content else None
    if payload is None:
        return []
    return _adapter(list[item_type]).validate_python(payload)
