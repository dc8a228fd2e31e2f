"""Cash-flow forecasting engine - projects the balance to month end"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple
from cashflow_coach.domain.models import Cadence, ForecastResult, Recurring, RiskTag, Transaction
from cashflow_coach.utils.date_utils import days_left_in_month, end_of_month, utcnow

# Step between occurrences; "monthly" is deliberately approximated as 30 days
CADENCE_STEP_DAYS: Dict[str, int] = {
    Cadence.WEEKLY: 7,
    Cadence.BIWEEKLY: 14,
    Cadence.FOURWEEKLY: 28,
    Cadence.MONTHLY: 30,
}
DEFAULT_STEP_DAYS = 30

BURN_WINDOW_DAYS = 30
TREND_WINDOW_DAYS = 7

HEAVY_BILLS_RATIO = 0.6  # committed outflow above 60% of balance
OVERSPEND_TREND_RATIO = 1.25  # last 7 days more than 25% above the 7 before


def rolling_daily_burn(txns: List[Transaction], today: Optional[datetime] = None) -> float:
    """
    Average daily variable spend over the trailing 30 days.

    Subscription transactions are excluded. The sum is divided by the fixed
    window length, not by the number of active days, so sparse histories
    produce a smoothed (lower) rate.
    """
    today = today or utcnow()
    cutoff = today - timedelta(days=BURN_WINDOW_DAYS)

    total = sum(
        abs(t.amount)
        for t in txns
        if t.date >= cutoff and t.amount < 0 and not t.is_subscription
    )
    return total / BURN_WINDOW_DAYS


def project_until_month_end(recurring: Recurring, today: Optional[datetime] = None) -> float:
    """
    Signed total a recurring item posts from its next date through month end.

    Occurrences are stepped by cadence; the last day of the month is inclusive.
    A next date already past month end contributes 0.
    """
    today = today or utcnow()
    month_end = end_of_month(today.date())
    step = timedelta(days=CADENCE_STEP_DAYS.get(recurring.cadence, DEFAULT_STEP_DAYS))

    total = 0.0
    occurrence = recurring.next_date
    while occurrence <= month_end:
        total += recurring.amount
        occurrence += step
    return total


def spend_trend(txns: List[Transaction], today: Optional[datetime] = None) -> Tuple[float, float]:
    """
    Outflow totals for the last 7 days and the 7 days before that.

    Returns: (last_7_spend, previous_7_spend)
    """
    today = today or utcnow()
    window = timedelta(days=TREND_WINDOW_DAYS)

    last_7 = 0.0
    previous_7 = 0.0
    for t in txns:
        if t.amount >= 0:
            continue
        age = today - t.date
        # Future-dated outflows have a negative age and land in the recent window
        if age < window:
            last_7 += abs(t.amount)
        elif age < 2 * window:
            previous_7 += abs(t.amount)

    return last_7, previous_7


def classify_risk(
    balance: float,
    committed: float,
    txns: List[Transaction],
    today: datetime,
) -> List[RiskTag]:
    """Risk tags for a forecast, in a fixed order"""
    risk: List[RiskTag] = []

    if committed < 0 and abs(committed) > balance * HEAVY_BILLS_RATIO:
        risk.append(RiskTag.HEAVY_BILLS)

    last_7, previous_7 = spend_trend(txns, today)
    if previous_7 > 0 and last_7 > previous_7 * OVERSPEND_TREND_RATIO:
        risk.append(RiskTag.OVERSPEND_TREND)

    return risk


def energy_bar(
    balance: float,
    txns: List[Transaction],
    recurrings: List[Recurring],
    today: Optional[datetime] = None,
) -> ForecastResult:
    """
    Main entry point: project the balance to the end of the current month.

    projected_eom = balance + committed + variable_to_month_end, where
    committed is every recurring item projected to month end and
    variable_to_month_end is the rolling burn rate times the days left.
    """
    today = today or utcnow()

    days_left = days_left_in_month(today.date())
    variable_to_month_end = -(rolling_daily_burn(txns, today) * days_left)
    committed = sum(project_until_month_end(r, today) for r in recurrings)

    projected_eom = balance + committed + variable_to_month_end
    safe_to_spend = max(0.0, balance - abs(committed + variable_to_month_end))

    return ForecastResult(
        safe_to_spend=safe_to_spend,
        projected_eom=projected_eom,
        committed=committed,
        variable_to_month_end=variable_to_month_end,
        days_left=days_left,
        risk=classify_risk(balance, committed, txns, today),
    )
