"""
Logging utilities for synthesis and deployment tooling.

Provides structured JSON logging with a correlation ID so that all messages
from one `cdk synth` or one CLI run can be grouped together. Log lines go to
stderr so that command output on stdout stays machine-readable.
"""

import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional


class StructuredLogger:
    """
    JSON logger with correlation ID support.

    Example:
        logger = StructuredLogger(__name__)
        logger.info("Created table", table_name="TestApp")
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))
        self.correlation_id = correlation_id or get_process_correlation_id()

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        """Internal method to emit structured JSON logs."""
        if not self.logger.isEnabledFor(logging.getLevelName(level)):
            return

        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "logger": self.logger.name,
            "message": message,
            "correlationId": self.correlation_id,
            **kwargs,
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        print(json.dumps(log_entry, default=str), file=sys.stderr)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info level message."""
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning level message."""
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error level message."""
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug level message."""
        self._log("DEBUG", message, **kwargs)


def get_correlation_id(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the correlation ID for this process.

    Uses CORRELATION_ID when set (e.g. by a CI pipeline), otherwise a new UUID.
    """
    environ = os.environ if environ is None else environ
    return environ.get("CORRELATION_ID") or str(uuid.uuid4())


@lru_cache(maxsize=1)
def get_process_correlation_id() -> str:
    """Correlation ID shared by every logger created in this process."""
    return get_correlation_id()
