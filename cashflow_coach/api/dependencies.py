"""Dependency injection for FastAPI endpoints"""

from datetime import datetime
from typing import Optional
from fastapi import Request
from cashflow_coach.infrastructure.clients.bank import BankClient
from cashflow_coach.utils.date_utils import to_naive_utc, utcnow


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bank_client() -> BankClient:
    """Provide Bank API client instance"""
    return BankClient()


def resolve_today(today: Optional[datetime]) -> datetime:
    """Pin the reference time once per request so every calculation shares it"""
    return to_naive_utc(today) if today is not None else utcnow()
