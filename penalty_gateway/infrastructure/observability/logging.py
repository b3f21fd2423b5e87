"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from penalty_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_penalty_computation(
    request_id: str,
    outcome: str,
    duration_ms: float,
    total_dues: Optional[int] = None,
    lines: Optional[int] = None,
    total_penalty: Optional[float] = None,
) -> None:
    """Log structured penalty computation outcome; rejections log at WARNING"""
    computed = outcome == "computed"
    logging.log(
        logging.INFO if computed else logging.WARNING,
        "Penalty computed" if computed else f"Penalty request rejected: {outcome}",
        extra={
            "request_id": request_id,
            "step": "penalty_complete",
            "outcome": outcome,
            "total_dues": total_dues,
            "lines": lines,
            "total_penalty": total_penalty,
            "duration_ms": duration_ms,
        },
    )
