import logging
from typing import IO, Any, Optional

PACKAGE_LOGGER = "onefuse_client"

# Extras written by OneFuseClient._log_call and log_event, in output order
LOG_EXTRA_FIELDS = (
    "operation",
    "method",
    "url",
    "endpoint",
    "status",
    "duration_ms",
    "error_type",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines: level, logger, event, then whichever API-call extras are set."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]
        message = record.getMessage()
        if message:
            pairs.append(("event", message))
        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))
        return " ".join(f"{key}={_quote(value)}" for key, value in pairs)


def _quote(value: Any) -> str:
    text = str(value)
    if isinstance(value, (bool, int, float)) or not any(c in text for c in ' ="'):
        return text
    return '"' + text.replace('"', '\\"') + '"'


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """
    Send the package's records to one logfmt handler.

    Only the onefuse_client logger is touched; calling again replaces the
    handler instead of stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "PACKAGE_LOGGER"]
