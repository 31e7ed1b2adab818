"""structlog setup for the client.

The library only obtains loggers; applications opt in to rendering by calling
configure_logging().
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from sourcegraph_client.infrastructure.observability.logging import request_schema_processor

_HANDLER_NAME = "sourcegraph_client"
_JSON_ENVS = frozenset({"qa", "staging", "prod", "production"})


def configure_logging(level: int = logging.INFO, renderer: Any | None = None) -> None:
    """Route structlog events and stdlib records through one processor chain.

    Calling it again swaps the handler it installed earlier; other root
    handlers are left in place.
    """
    renderer = renderer or _select_renderer()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        request_schema_processor,
    ]
    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *processors, renderer],
        )
    )
    root = logging.getLogger()
    for previous in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(previous)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(component: str) -> Any:
    return structlog.get_logger().bind(component=component)


def _select_renderer() -> Any:
    # LOG_FORMAT (json|console) wins; otherwise deployed APP_ENVs get JSON.
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if not log_format:
        app_env = os.environ.get("APP_ENV", "local").lower()
        log_format = "json" if app_env in _JSON_ENVS else "console"
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
