"""Affordability check for a wishlist of purchases"""

from datetime import datetime
from typing import List, Optional
from cashflow_coach.domain.forecast import energy_bar
from cashflow_coach.domain.models import (
    AffordabilityResult,
    Recurring,
    Transaction,
    Verdict,
    WishItem,
)
from cashflow_coach.utils.date_utils import utcnow

DEFAULT_MIN_BUFFER = 100.0

DELAY_IMPROVEMENT_THRESHOLD = 50.0
SPLIT_PAYMENT_THRESHOLD = 150.0

SUGGEST_DELAY = "Delay purchase to month-end"
SUGGEST_SPLIT = "Split into two payments"
SUGGEST_POT = "Create a pot and autosave weekly"


def determine_verdict(projected_eom: float, min_buffer: float) -> Verdict:
    """
    Map the post-purchase end-of-month balance to a verdict.

    - above min_buffer:          green
    - above 0, up to min_buffer: amber
    - 0 or below:                red
    """
    if projected_eom > min_buffer:
        return Verdict.GREEN
    elif projected_eom > 0:
        return Verdict.AMBER
    else:
        return Verdict.RED


def can_i_afford_it(
    balance: float,
    txns: List[Transaction],
    recurrings: List[Recurring],
    items: List[WishItem],
    min_buffer: float = DEFAULT_MIN_BUFFER,
    today: Optional[datetime] = None,
) -> AffordabilityResult:
    """
    Forecast the month with and without the wishlist and grade the outcome.

    Every item is assumed to be paid immediately, whatever its `when` says.
    Suggestions are only offered when the verdict is not green.
    """
    today = today or utcnow()

    before = energy_bar(balance, txns, recurrings, today)
    total = sum(item.price for item in items)
    after = energy_bar(balance - total, txns, recurrings, today)

    verdict = determine_verdict(after.projected_eom, min_buffer)

    suggestions: List[str] = []
    if verdict != Verdict.GREEN:
        # The month-end alternative is the undiscounted forecast minus the total,
        # which equals the immediate case, so this never fires. Kept until the
        # deferred debit is actually modelled.
        delayed_eom = energy_bar(balance, txns, recurrings, today).projected_eom - total
        if delayed_eom > after.projected_eom + DELAY_IMPROVEMENT_THRESHOLD:
            suggestions.append(SUGGEST_DELAY)

        if total > SPLIT_PAYMENT_THRESHOLD:
            suggestions.append(SUGGEST_SPLIT)

        suggestions.append(SUGGEST_POT)

    return AffordabilityResult(
        before=before,
        after=after,
        total=total,
        verdict=verdict,
        suggestions=suggestions,
    )
