"""
Logging utilities for the generator.

setup_logging configures the stderr handler used by the CLI; GeneratorLogger
emits structured JSON events for generation and project lifecycle.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

EVENT_LOGGER_NAME = "app_idea_generator.events"


def setup_logging(name: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Setup logging for the CLI

    Args:
        name: Logger name (default: the package logger)
        verbose: Log at DEBUG instead of WARNING

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or "app_idea_generator")

    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    # Avoid duplicate handlers; sys.stderr may have been replaced since the first call
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(sys.stderr)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter = logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class GeneratorLogger:
    """Structured JSON logger for generation and project events."""

    def __init__(self, name: str = EVENT_LOGGER_NAME):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def state_transition(self, project_id: Optional[str], from_state: str, to_state: str):
        """Log a view state transition."""
        self._log(
            logging.INFO,
            "state_transition",
            project_id=project_id,
            from_state=from_state,
            to_state=to_state
        )

    def generation_started(self, request_kind: str, model: str):
        self._log(logging.INFO, "generation_started", request_kind=request_kind, model=model)

    def generation_complete(self, request_kind: str, model: str, duration_seconds: float):
        self._log(
            logging.INFO,
            "generation_complete",
            request_kind=request_kind,
            model=model,
            duration_seconds=round(duration_seconds, 2)
        )

    def document_added(self, project_id: str, file_type: str):
        self._log(logging.INFO, "document_added", project_id=project_id, file_type=file_type)

    def document_deleted(self, project_id: str, file_type: str):
        self._log(logging.INFO, "document_deleted", project_id=project_id, file_type=file_type)

    def project_created(self, project_id: str, title: str):
        self._log(logging.INFO, "project_created", project_id=project_id, title=title)

    def project_deleted(self, project_id: str):
        self._log(logging.INFO, "project_deleted", project_id=project_id)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, "warning", message=message, **kwargs)

    def error(self, project_id: Optional[str], error_type: str, message: str):
        """Log an error."""
        self._log(
            logging.ERROR,
            "error",
            project_id=project_id,
            error_type=error_type,
            message=message
        )
