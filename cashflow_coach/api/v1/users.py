"""Per-user endpoints backed by live bank data"""

import time
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from cashflow_coach.api.v1.schemas import (
    AffordabilityResponse,
    DashboardResponse,
    ForecastResponse,
    UserAffordabilityRequest,
)
from cashflow_coach.api.dependencies import get_bank_client, get_request_id, resolve_today
from cashflow_coach.infrastructure.clients.bank import BankClient
from cashflow_coach.domain.affordability import can_i_afford_it
from cashflow_coach.domain.exceptions import BankAPIError
from cashflow_coach.domain.forecast import energy_bar
from cashflow_coach.domain.insights import generate_micro_insights
from cashflow_coach.domain.recurrence import recurrings_from_bills
from cashflow_coach.infrastructure.observability.metrics import (
    bank_fetch_failures_counter,
    record_forecast,
    record_insights,
    record_verdict,
)
from cashflow_coach.infrastructure.observability.logging import log_affordability, log_forecast
from cashflow_coach.config import settings

router = APIRouter()


@router.get("/users/{user_id}/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    user_id: str,
    request: Request,
    today: Optional[datetime] = Query(None, description="Reference time, defaults to now (UTC)"),
    bank_client: BankClient = Depends(get_bank_client),
):
    """
    Energy bar and micro-insights for a user.

    Flow:
    1. Fetch balance, transactions, and upcoming bills from the bank API
    2. Turn recurring subscription bills into forecast commitments
    3. Forecast to month end and generate micro-insights
    """
    start_time = time.time()
    request_id = get_request_id(request)
    now = resolve_today(today)

    try:
        snapshot = await bank_client.get_account_snapshot(user_id)
        recurrings = recurrings_from_bills(snapshot.upcoming_bills)

        forecast = energy_bar(snapshot.balance, snapshot.transactions, recurrings, now)
        insights = generate_micro_insights(snapshot.transactions, now)

        duration_ms = (time.time() - start_time) * 1000
        record_forecast(forecast)
        record_insights("micro", len(insights))
        log_forecast(request_id, forecast, duration_ms)

        return DashboardResponse(
            user_id=user_id,
            balance=snapshot.balance,
            forecast=ForecastResponse.from_domain(forecast),
            insights=insights,
        )

    except BankAPIError as e:
        bank_fetch_failures_counter.inc()
        logging.error(f"Bank API error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=503, detail="Bank service unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/users/{user_id}/affordability", response_model=AffordabilityResponse)
async def check_user_affordability(
    user_id: str,
    request_body: UserAffordabilityRequest,
    request: Request,
    bank_client: BankClient = Depends(get_bank_client),
):
    """Affordability check for a wishlist using the user's live bank data"""
    start_time = time.time()
    request_id = get_request_id(request)
    min_buffer = request_body.min_buffer if request_body.min_buffer is not None else settings.default_min_buffer

    try:
        snapshot = await bank_client.get_account_snapshot(user_id)

        result = can_i_afford_it(
            balance=snapshot.balance,
            txns=snapshot.transactions,
            recurrings=recurrings_from_bills(snapshot.upcoming_bills),
            items=[i.to_domain() for i in request_body.items],
            min_buffer=min_buffer,
            today=resolve_today(request_body.today),
        )

        duration_ms = (time.time() - start_time) * 1000
        record_verdict(result.verdict)
        log_affordability(request_id, result, duration_ms)

        return AffordabilityResponse.from_domain(result)

    except BankAPIError as e:
        bank_fetch_failures_counter.inc()
        logging.error(f"Bank API error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=503, detail="Bank service unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Internal server error")
