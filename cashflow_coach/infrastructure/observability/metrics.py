"""Prometheus metrics for monitoring forecast risk, affordability verdicts, and bank fetches"""

from prometheus_client import Counter, Histogram
from cashflow_coach.domain.models import ForecastResult, Verdict

# Engine metrics
forecast_counter = Counter(
    "cashflow_forecast_total",
    "Forecasts computed, by risk tag",
    ["risk"],  # heavy_bills | overspend_trend | none
)

verdict_counter = Counter(
    "cashflow_affordability_verdict_total",
    "Affordability verdicts issued",
    ["verdict"],  # green | amber | red
)

insights_counter = Counter(
    "cashflow_insights_emitted_total",
    "Insights returned to clients",
    ["kind"],  # cohort | micro
)

# Bank API metrics
bank_fetch_failures_counter = Counter(
    "bank_fetch_failures_total",
    "Failed bank API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_forecast(result: ForecastResult) -> None:
    """Count a forecast once per risk tag it carries ("none" when clean)"""
    if not result.risk:
        forecast_counter.labels(risk="none").inc()
        return

    for tag in result.risk:
        forecast_counter.labels(risk=tag.value).inc()


def record_verdict(verdict: Verdict) -> None:
    verdict_counter.labels(verdict=verdict.value).inc()


def record_insights(kind: str, count: int) -> None:
    insights_counter.labels(kind=kind).inc(count)
