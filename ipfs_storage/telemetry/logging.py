from __future__ import annotations

import logging
from typing import Any, MutableMapping

import structlog

from ..config import get_settings

# Values under these keys are replaced before rendering; access tokens must never reach the sink
SENSITIVE_KEYS = frozenset({"token", "access_token", "authorization", "headers"})
REDACTED = "[redacted]"


def _resolve_level(level: str | None) -> int:
    name = (level or get_settings().log_level).upper()
    return getattr(logging, name, logging.INFO)


def _redact_credentials(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]):
    for key in SENSITIVE_KEYS.intersection(event_dict.keys()):
        event_dict[key] = REDACTED
    return event_dict


def init_logging(level: str | None = None, *, json: bool = True) -> None:
    """Route structlog through stdlib logging.

    JSON lines carry ts, level, logger, event and whatever the call site bound
    (name/size for uploads, cid/status for gateway fetches). ``json=False``
    switches to the human-readable console renderer.
    """
    lvl = _resolve_level(level)
    logging.basicConfig(level=lvl, format="%(message)s")
    # urllib3 logs each upload retry; keep it at WARNING or above
    logging.getLogger("urllib3").setLevel(max(lvl, logging.WARNING))

    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            _redact_credentials,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(lvl),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    if name is None:
        return structlog.get_logger(**initial_values)
    return structlog.get_logger(name, **initial_values)
