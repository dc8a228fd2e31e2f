"""POST /v1/insights/* - cohort comparison and micro-insights"""

from fastapi import APIRouter

from cashflow_coach.api.v1.schemas import (
    CohortRequest,
    CohortResponse,
    InsightSchema,
    MicroInsightsRequest,
    MicroInsightsResponse,
)
from cashflow_coach.api.dependencies import resolve_today
from cashflow_coach.domain.cohort import compare_to_cohort
from cashflow_coach.domain.insights import generate_micro_insights
from cashflow_coach.infrastructure.observability.metrics import record_insights

router = APIRouter()


@router.post("/insights/cohort", response_model=CohortResponse)
def cohort_insights(request_body: CohortRequest):
    """Up to 3 insights where category spend is well above peers or last month"""
    insights = compare_to_cohort(
        [c.to_domain() for c in request_body.my],
        [c.to_domain() for c in request_body.cohort],
    )
    record_insights("cohort", len(insights))
    return CohortResponse(insights=[InsightSchema.from_domain(i) for i in insights])


@router.post("/insights/micro", response_model=MicroInsightsResponse)
def micro_insights(request_body: MicroInsightsRequest):
    """Up to 3 nudges: unused subscriptions, round-ups, weekend skew"""
    insights = generate_micro_insights(
        [t.to_domain() for t in request_body.transactions],
        today=resolve_today(request_body.today),
    )
    record_insights("micro", len(insights))
    return MicroInsightsResponse(insights=insights)
