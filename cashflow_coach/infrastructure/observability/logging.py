"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from cashflow_coach.domain.models import AffordabilityResult, ForecastResult


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "cashflow-coach"


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


def log_forecast(request_id: str, result: ForecastResult, duration_ms: float) -> None:
    """Log structured forecast outcome"""
    logging.info(
        "Forecast completed",
        extra={
            "request_id": request_id,
            "step": "forecast_complete",
            "projected_eom": round(result.projected_eom, 2),
            "safe_to_spend": round(result.safe_to_spend, 2),
            "days_left": result.days_left,
            "risk": [tag.value for tag in result.risk],
            "duration_ms": duration_ms,
        },
    )


def log_affordability(request_id: str, result: AffordabilityResult, duration_ms: float) -> None:
    """Log structured affordability outcome for analysis"""
    logging.info(
        "Affordability check completed",
        extra={
            "request_id": request_id,
            "step": "affordability_complete",
            "verdict": result.verdict.value,
            "total": round(result.total, 2),
            "projected_eom_after": round(result.after.projected_eom, 2),
            "suggestion_count": len(result.suggestions),
            "duration_ms": duration_ms,
        },
    )
