"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pythonjsonlogger import jsonlogger

from projection_engine.config import settings

logger = logging.getLogger("projection_engine.calculations")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger"""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_calculation(
    calculator: str,
    duration_ms: float,
    ok: bool,
    fields: Optional[List[str]] = None,
) -> None:
    """Log one calculator invocation; rejected input lists the offending fields"""
    extra: Dict[str, Any] = {
        "calculator": calculator,
        "step": "calculation_complete" if ok else "validation_failed",
        "duration_ms": round(duration_ms, 3),
    }
    if fields:
        extra["invalid_fields"] = fields

    if ok:
        logger.info("Calculation completed", extra=extra)
    else:
        logger.warning("Calculation rejected", extra=extra)
