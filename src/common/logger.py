"""
Logging for the career coach service.

Workflows log through a WorkflowLogger, which prefixes every message with the
workflow name and, once bound, the first eight characters of the caller's
subject id:

    [insights] [user:auth0|12] Cache HIT for 'software-engineering'

`setup_logging()` is called once by the API at import time.
"""

import json
import logging
import os
import sys
from typing import Any, MutableMapping, Optional, Tuple

# DEBUG_MODE=true turns on DEBUG for every workflow logger
_DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("pymongo", "httpx", "httpcore", "openai")


def is_debug_mode() -> bool:
    """Check if debug mode is enabled globally."""
    return _DEBUG_MODE


class WorkflowLogger(logging.LoggerAdapter):
    """Logger adapter adding [layer] and [user:...] prefixes."""

    def __init__(
        self,
        name: str,
        subject_id: Optional[str] = None,
        layer: Optional[str] = None,
        debug_mode: Optional[bool] = None,
    ):
        """
        Args:
            name: Logger name (usually __name__)
            subject_id: Caller's subject id, if known
            layer: Workflow name (e.g. "insights", "quiz")
            debug_mode: Force DEBUG on (None follows DEBUG_MODE)
        """
        super().__init__(logging.getLogger(name), {})
        self.subject_id = subject_id
        self.layer = layer
        self._debug_mode = is_debug_mode() if debug_mode is None else debug_mode
        if self._debug_mode:
            self.logger.setLevel(logging.DEBUG)

    @property
    def level(self) -> int:
        return self.logger.level

    def bind(self, subject_id: str) -> "WorkflowLogger":
        """Same logger, tagged with a subject id."""
        return WorkflowLogger(self.logger.name, subject_id, self.layer, self._debug_mode)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        prefix = []
        if self.layer:
            prefix.append(f"[{self.layer}]")
        if self.subject_id:
            prefix.append(f"[user:{self.subject_id[:8]}]")
        if not prefix:
            return msg, kwargs
        return f"{' '.join(prefix)} {msg}", kwargs


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        format: "simple" for human-readable lines, "json" for one object per line
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(
    name: str,
    subject_id: Optional[str] = None,
    layer: Optional[str] = None,
    debug_mode: Optional[bool] = None,
) -> WorkflowLogger:
    """Get a workflow logger (see WorkflowLogger)."""
    return WorkflowLogger(name, subject_id, layer, debug_mode)
