"""Structured JSON logging for gateway exchanges"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from one_two_pay.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on stderr, leaving stdout for command output"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


logger = logging.getLogger("one_two_pay.gateway")


def log_transfer(ref1: str, outcome: str, status_code: Optional[int], duration_ms: float) -> None:
    """Log structured payout outcome"""
    logger.info(
        "Transfer completed",
        extra={
            "ref1": ref1,
            "step": "transfer_complete",
            "outcome": outcome,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )


def log_query(ref1: str, outcome: str, status_code: Optional[int], duration_ms: float) -> None:
    """Log structured inquiry outcome"""
    logger.info(
        "Inquiry completed",
        extra={
            "ref1": ref1,
            "step": "query_complete",
            "outcome": outcome,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )
