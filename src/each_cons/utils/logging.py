"""Logging helpers for the command line tools."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from each_cons.constants import DEFAULT_LOG_LEVEL, JSON_LOGS_ENV_VAR


def json_logs_enabled() -> bool:
    return os.getenv(JSON_LOGS_ENV_VAR, "false").lower() == "true"


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL, json_logs: bool | None = None
) -> None:
    """Configure global logging. Respects the EACH_CONS_JSON_LOGS env override."""
    if json_logs is None:
        json_logs = json_logs_enabled()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s" if json_logs else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(
    logger: logging.Logger, event: str, *, json_logs: bool | None = None, **fields: Any
) -> None:
    """Emit a structured log event at INFO level."""
    if json_logs is None:
        json_logs = json_logs_enabled()

    payload = {"event": event, **fields}
    if json_logs:
        logger.info(json.dumps(payload))
    else:
        logger.info(payload)
