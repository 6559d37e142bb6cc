"""
Centralized logging for built handlers.

A single Powertools Logger is shared by every handler. Per-invocation fields
travel with each log call as ``extra`` instead of being appended to the shared
logger, so concurrent invocations never see each other's request ids.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from aws_lambda_powertools.logging import Logger

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# logging.Logger.makeRecord refuses extra keys that shadow LogRecord attributes
RESERVED_RECORD_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
RESERVED_KEY_PREFIX = 'field_'

Payload = Optional[Dict[str, Any]]


def _split(message: Any, payload: Payload) -> Tuple[str, Payload]:
    # Payload-only calls: logger.trace({"input": ...})
    if isinstance(message, dict) and payload is None:
        return '', message
    return ('' if message is None else str(message)), payload


class ScopedLogger:
    """Leveled structured logger bound to a scope name and a set of fields."""

    def __init__(self, scope: str, fields: Dict[str, Any], base: Logger = logger):
        self.scope = scope
        self.fields = dict(fields)
        self._base = base

    def _extra(self, payload: Payload) -> Dict[str, Any]:
        extra = {"scope": self.scope}
        for source in (self.fields, payload or {}):
            for key, value in source.items():
                key = str(key)
                if key in RESERVED_RECORD_KEYS:
                    key = f"{RESERVED_KEY_PREFIX}{key}"
                extra[key] = value
        return extra

    def trace(self, message: Any = None, payload: Payload = None) -> None:
        message, payload = _split(message, payload)
        # Powertools has no trace level
        self._base.debug(message, extra=self._extra(payload))

    def debug(self, message: Any = None, payload: Payload = None) -> None:
        message, payload = _split(message, payload)
        self._base.debug(message, extra=self._extra(payload))

    def info(self, message: Any = None, payload: Payload = None) -> None:
        message, payload = _split(message, payload)
        self._base.info(message, extra=self._extra(payload))

    def warning(self, message: Any = None, payload: Payload = None) -> None:
        message, payload = _split(message, payload)
        self._base.warning(message, extra=self._extra(payload))

    def error(self, error: BaseException | None, message: Any = None, payload: Payload = None) -> None:
        """Log ``message`` at error level, attaching ``error`` and its traceback when given."""
        message, payload = _split(message, payload)
        extra = self._extra(payload)
        if error is None:
            self._base.error(message, extra=extra)
            return
        extra["error"] = str(error)
        extra["error_type"] = type(error).__name__
        exc_info = (type(error), error, error.__traceback__)
        self._base.error(message or str(error), exc_info=exc_info, extra=extra)


LoggerProvider = Callable[..., ScopedLogger]


def get_logger(scope: str, **fields: Any) -> ScopedLogger:
    """Return a logger tagged with ``scope`` and the given structured fields."""
    return ScopedLogger(scope, fields)
