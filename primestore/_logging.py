from __future__ import annotations

import json
import logging

from datetime import datetime, timezone
from typing import Optional, TypeVar

from ._store import Dispatch, Middleware, Store


__all__ = (
    "JSONFormatter",

    "log_actions",
    "setup_logging"
)


A = TypeVar("A")
S = TypeVar("S")


LOGGER_NAME = "primestore"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
EXTRA_FIELDS = ("action", "state", "subscribers")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_FIELDS:
            value = record.__dict__.get(key)

            if value is not None:
                log[key] = value

        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)

        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    fmt: str = "text",
    handler: Optional[logging.Handler] = None
) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()

    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logger


def log_actions(logger: Optional[logging.Logger] = None) -> Middleware:
    logger = logger or logging.getLogger(f"{LOGGER_NAME}.actions")

    def middleware(store: Store[S, A], next_dispatch: Dispatch, action: A) -> S:
        state = next_dispatch(action)

        logger.info(
            "%r -> %r",
            action,
            state,
            extra={"action": repr(action), "state": repr(state)}
        )

        return state

    return middleware
