"""Micro-insights - short nudges derived from raw transaction history"""

from datetime import datetime, timedelta
from typing import List, Optional
from cashflow_coach.domain.models import Transaction
from cashflow_coach.utils.date_utils import utcnow
from cashflow_coach.utils.money import round_half_up

MAX_INSIGHTS = 3

UNUSED_SUBSCRIPTION_DAYS = 60
NEVER_USED_DAYS = 999
ROUND_UP_THRESHOLD = 10.0
WEEKEND_SKEW_RATIO = 1.5

SATURDAY = 5


def days_since_last_use(subscription: Transaction, txns: List[Transaction], today: datetime) -> int:
    """Whole days since the latest non-subscription outflow at the same merchant (999 if none)"""
    usage = [
        t for t in txns
        if t.merchant == subscription.merchant and t.amount < 0 and not t.is_subscription
    ]
    if not usage:
        return NEVER_USED_DAYS

    last_hit = max(usage, key=lambda t: t.date)
    return round_half_up((today - last_hit.date) / timedelta(days=1))


def round_up_potential(outflows: List[Transaction]) -> float:
    """Spare change swept by rounding each outflow up to the next whole unit"""
    return sum(1 - (abs(t.amount) % 1) for t in outflows)


def weekend_split(outflows: List[Transaction]) -> tuple[float, float]:
    """Returns: (weekend_spend, weekday_spend)"""
    weekend = sum(abs(t.amount) for t in outflows if t.date.weekday() >= SATURDAY)
    weekday = sum(abs(t.amount) for t in outflows if t.date.weekday() < SATURDAY)
    return weekend, weekday


def generate_micro_insights(txns: List[Transaction], today: Optional[datetime] = None) -> List[str]:
    """
    Up to 3 nudges, always in this order:
    1. named subscriptions with no usage at the same merchant for over 60 days
    2. round-up savings when the swept change exceeds 10
    3. weekend spend above 1.5x weekday spend
    """
    today = today or utcnow()
    out: List[str] = []

    # Without a merchant there is nothing to name or match usage against
    for sub in (t for t in txns if t.is_subscription and t.merchant is not None):
        days = days_since_last_use(sub, txns, today)
        if days > UNUSED_SUBSCRIPTION_DAYS:
            out.append(f"You haven't used {sub.merchant} in {days} days. Consider pausing.")

    outflows = [t for t in txns if t.amount < 0]

    roundable = round_up_potential(outflows)
    if roundable > ROUND_UP_THRESHOLD:
        out.append(f"Round-ups could add ~£{roundable:.2f} this month.")

    weekend, weekday = weekend_split(outflows)
    if weekday and weekend > weekday * WEEKEND_SKEW_RATIO:
        out.append(
            f"Weekend spend is {round_half_up(weekend / weekday * 100)}% of weekdays. "
            "Plan ahead to avoid overspend."
        )

    return out[:MAX_INSIGHTS]
