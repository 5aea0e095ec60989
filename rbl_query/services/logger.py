"""Structured JSON logging for container platforms."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Process instance ID for correlation across log entries
INSTANCE_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds instance_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        # Add timestamp in ISO 8601 format
        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )

        log_record["instance_id"] = INSTANCE_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # JSON handler for stdout (container logs)
    json_handler = logging.StreamHandler(sys.stdout)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_query(
    ip: str,
    listed_zones: list[str],
    unknown_zones: list[str],
    duration_ms: int,
) -> None:
    """Log structured per-request query result.

    Args:
        ip: IPv4 address checked.
        listed_zones: RBL zones where IP is LISTED.
        unknown_zones: RBL zones whose lookup was inconclusive.
        duration_ms: Processing time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "RBL query completed",
        extra={
            "ip": ip,
            "listed_zones": listed_zones,
            "unknown_zones": unknown_zones,
            "duration_ms": duration_ms,
        },
    )
