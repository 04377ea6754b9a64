from __future__ import annotations

import logging
from typing import Any

# Attributes every LogRecord already has; passing one in extra raises KeyError
RESERVED_LOG_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """Emit ``event`` at info level with ``fields`` as record extras."""
    log = logger or logging.getLogger("onefuse_client.observability")
    extra = {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}
    log.info(event, extra=extra)


__all__ = ["log_event", "RESERVED_LOG_KEYS"]
