# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Structured logging for nodeflow.

Every record can carry the run it belongs to. The fields in CONTEXT_FIELDS
(workflow, execution and node ids) are part of the output format: JSON
records place them right after the message, text records append them in
brackets. Any other `extra` fields follow in the JSON output only.

    log_event(logger, "Node completed", workflow_id="wf-1", node_id="n2")
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict

# Run/node identifiers, in output order
CONTEXT_FIELDS = ("workflow_id", "execution_id", "node_id")

# Attributes every LogRecord has; anything else came in through `extra`
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Run/node identifiers attached to a record, in CONTEXT_FIELDS order"""
    return {
        field: getattr(record, field)
        for field in CONTEXT_FIELDS
        if getattr(record, field, None) is not None
    }


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Remaining `extra` fields (not context, not standard attributes)"""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and key not in CONTEXT_FIELDS
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Key order: timestamp, level, logger, message, context fields, extras,
    exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(context_fields(record))
        log_data.update(extra_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with the run context appended"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = context_fields(record)
        if not fields:
            return line
        suffix = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{line} [{suffix}]"


def get_logger(name: str, log_level: str = "INFO", log_format: str = "json") -> logging.Logger:
    """
    Get a logger writing to stdout.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "json" or "text"
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Replace handlers so repeated calls don't duplicate output
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    logger.addHandler(handler)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    level: str = "INFO",
    **kwargs: Any
) -> None:
    """
    Log an event with structured fields.

    Args:
        logger: Logger instance
        event: Event message
        level: Log level
        **kwargs: Fields to attach; workflow_id, execution_id and node_id
            are rendered by both formatters
    """
    log_func = getattr(logger, level.lower())
    log_func(event, extra=kwargs)


def _configured_logger(name: str) -> logging.Logger:
    from nodeflow.core.config import get_config
    config = get_config()
    return get_logger(name, log_level=config.log_level, log_format=config.log_format)


def get_api_logger() -> logging.Logger:
    """Logger for API routes"""
    return _configured_logger("nodeflow.api")


def get_service_logger(service_name: str) -> logging.Logger:
    return _configured_logger(f"nodeflow.service.{service_name}")


def get_engine_logger(component: str) -> logging.Logger:
    """Logger for the engine, node executors and connectors"""
    return _configured_logger(f"nodeflow.engine.{component}")
