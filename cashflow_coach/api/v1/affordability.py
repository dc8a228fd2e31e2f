"""POST /v1/affordability - can the user afford a wishlist this month"""

import time
from fastapi import APIRouter, Request

from cashflow_coach.api.v1.schemas import AffordabilityRequest, AffordabilityResponse
from cashflow_coach.api.dependencies import get_request_id, resolve_today
from cashflow_coach.domain.affordability import can_i_afford_it
from cashflow_coach.infrastructure.observability.metrics import record_verdict
from cashflow_coach.infrastructure.observability.logging import log_affordability
from cashflow_coach.config import settings

router = APIRouter()


@router.post("/affordability", response_model=AffordabilityResponse)
def check_affordability(request_body: AffordabilityRequest, request: Request):
    """
    Compare month-end forecasts with and without the wishlist.

    Verdict is green above the buffer, amber between 0 and the buffer, and red
    at or below 0. Suggestions are only returned for amber and red.
    """
    start_time = time.time()
    min_buffer = request_body.min_buffer if request_body.min_buffer is not None else settings.default_min_buffer

    result = can_i_afford_it(
        balance=request_body.balance,
        txns=[t.to_domain() for t in request_body.transactions],
        recurrings=[r.to_domain() for r in request_body.recurrings],
        items=[i.to_domain() for i in request_body.items],
        min_buffer=min_buffer,
        today=resolve_today(request_body.today),
    )

    duration_ms = (time.time() - start_time) * 1000
    record_verdict(result.verdict)
    log_affordability(get_request_id(request), result, duration_ms)

    return AffordabilityResponse.from_domain(result)
