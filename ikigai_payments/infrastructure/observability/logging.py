"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from ikigai_payments.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_payment_scheduled(
    request_id: str,
    payment_id: str,
    school_name: str,
    amount_minor: int,
    is_recurring: bool,
    duration_ms: float,
) -> None:
    """Log structured outcome of a confirmed payment"""
    logging.info(
        "Payment scheduled",
        extra={
            "request_id": request_id,
            "payment_id": payment_id,
            "school_name": school_name,
            "step": "payment_confirmed",
            "schedule": "recurring" if is_recurring else "one_time",
            "amount_minor": amount_minor,
            "duration_ms": duration_ms,
        },
    )
