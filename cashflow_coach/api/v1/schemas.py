"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional

from cashflow_coach.domain.models import (
    AffordabilityResult,
    Cadence,
    CategorySpend,
    CohortStats,
    ForecastResult,
    Insight,
    PurchaseTiming,
    Recurring,
    RiskTag,
    Transaction,
    Verdict,
    WishItem,
)
from cashflow_coach.utils.date_utils import to_naive_utc


class TransactionSchema(BaseModel):
    """Ledger record; negative amount = outflow"""

    id: str
    date: datetime
    amount: float
    category: str
    merchant: Optional[str] = None
    is_subscription: bool = False

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            date=to_naive_utc(self.date),
            amount=self.amount,
            category=self.category,
            merchant=self.merchant,
            is_subscription=self.is_subscription,
        )


class RecurringSchema(BaseModel):
    """Recurring bill (negative) or income (positive)"""

    label: str
    amount: float
    cadence: Cadence
    next_date: date

    def to_domain(self) -> Recurring:
        return Recurring(label=self.label, amount=self.amount, cadence=self.cadence, next_date=self.next_date)


class WishItemSchema(BaseModel):
    label: str
    price: float = Field(..., gt=0, description="Purchase price")
    when: Optional[PurchaseTiming] = None

    def to_domain(self) -> WishItem:
        return WishItem(label=self.label, price=self.price, when=self.when)


class ForecastRequest(BaseModel):
    """Request body for POST /v1/forecast"""

    balance: float
    transactions: List[TransactionSchema] = []
    recurrings: List[RecurringSchema] = []
    today: Optional[datetime] = Field(None, description="Reference time, defaults to now (UTC)")


class ForecastResponse(BaseModel):
    """End-of-month projection ("energy bar")"""

    safe_to_spend: float
    projected_eom: float
    committed: float
    variable_to_month_end: float
    days_left: int
    risk: List[RiskTag]

    @classmethod
    def from_domain(cls, result: ForecastResult) -> "ForecastResponse":
        return cls(
            safe_to_spend=result.safe_to_spend,
            projected_eom=result.projected_eom,
            committed=result.committed,
            variable_to_month_end=result.variable_to_month_end,
            days_left=result.days_left,
            risk=result.risk,
        )


class AffordabilityRequest(ForecastRequest):
    """Request body for POST /v1/affordability"""

    items: List[WishItemSchema] = []
    min_buffer: Optional[float] = Field(None, description="Cushion to keep at month end")


class UserAffordabilityRequest(BaseModel):
    """Request body for POST /v1/users/{user_id}/affordability"""

    items: List[WishItemSchema] = []
    min_buffer: Optional[float] = None
    today: Optional[datetime] = None


class AffordabilityResponse(BaseModel):
    """Verdict for a wishlist, with forecasts before and after the spend"""

    before: ForecastResponse
    after: ForecastResponse
    total: float
    verdict: Verdict
    suggestions: List[str]

    @classmethod
    def from_domain(cls, result: AffordabilityResult) -> "AffordabilityResponse":
        return cls(
            before=ForecastResponse.from_domain(result.before),
            after=ForecastResponse.from_domain(result.after),
            total=result.total,
            verdict=result.verdict,
            suggestions=result.suggestions,
        )


class CategorySpendSchema(BaseModel):
    category: str
    this_month: float
    last_month: Optional[float] = None

    def to_domain(self) -> CategorySpend:
        return CategorySpend(category=self.category, this_month=self.this_month, last_month=self.last_month)


class CohortStatsSchema(BaseModel):
    category: str
    median: float
    p75: float

    def to_domain(self) -> CohortStats:
        return CohortStats(category=self.category, median=self.median, p75=self.p75)


class CohortRequest(BaseModel):
    """Request body for POST /v1/insights/cohort"""

    my: List[CategorySpendSchema]
    cohort: List[CohortStatsSchema]


class InsightSchema(BaseModel):
    title: str
    body: str

    @classmethod
    def from_domain(cls, insight: Insight) -> "InsightSchema":
        return cls(title=insight.title, body=insight.body)


class CohortResponse(BaseModel):
    insights: List[InsightSchema]


class MicroInsightsRequest(BaseModel):
    """Request body for POST /v1/insights/micro"""

    transactions: List[TransactionSchema]
    today: Optional[datetime] = None


class MicroInsightsResponse(BaseModel):
    insights: List[str]


class DashboardResponse(BaseModel):
    """Response for GET /v1/users/{user_id}/dashboard"""

    user_id: str
    balance: float
    forecast: ForecastResponse
    insights: List[str]
