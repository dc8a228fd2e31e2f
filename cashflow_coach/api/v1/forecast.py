"""POST /v1/forecast - end-of-month cash-flow projection"""

import time
from fastapi import APIRouter, Request

from cashflow_coach.api.v1.schemas import ForecastRequest, ForecastResponse
from cashflow_coach.api.dependencies import get_request_id, resolve_today
from cashflow_coach.domain.forecast import energy_bar
from cashflow_coach.infrastructure.observability.metrics import record_forecast
from cashflow_coach.infrastructure.observability.logging import log_forecast

router = APIRouter()


@router.post("/forecast", response_model=ForecastResponse)
def create_forecast(request_body: ForecastRequest, request: Request):
    """
    Project the balance to month end from history and recurring commitments.

    Returns safe-to-spend, projected end-of-month balance, the committed and
    variable components, days left, and any risk tags.
    """
    start_time = time.time()

    result = energy_bar(
        balance=request_body.balance,
        txns=[t.to_domain() for t in request_body.transactions],
        recurrings=[r.to_domain() for r in request_body.recurrings],
        today=resolve_today(request_body.today),
    )

    duration_ms = (time.time() - start_time) * 1000
    record_forecast(result)
    log_forecast(get_request_id(request), result, duration_ms)

    return ForecastResponse.from_domain(result)
