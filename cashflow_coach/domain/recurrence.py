"""Maps upcoming bills onto recurring commitments for the forecast"""

from typing import List, Optional, Tuple
from cashflow_coach.domain.models import Cadence, Recurring, UpcomingBill

# Evaluated top to bottom, first match wins; "weekly" must come after the
# longer patterns that contain it.
CADENCE_RULES: List[Tuple[Tuple[str, ...], Cadence]] = [
    (("fourweekly", "four-weekly"), Cadence.FOURWEEKLY),
    (("biweekly", "bi-weekly"), Cadence.BIWEEKLY),
    (("weekly",), Cadence.WEEKLY),
]


def cadence_for(recurrence: Optional[str]) -> Cadence:
    """Resolve a free-text recurrence label ("Bi-weekly", "monthly", ...) to a cadence"""
    text = (recurrence or "").lower()
    for patterns, cadence in CADENCE_RULES:
        if any(p in text for p in patterns):
            return cadence
    return Cadence.MONTHLY


def recurrings_from_bills(bills: List[UpcomingBill]) -> List[Recurring]:
    """
    Convert recurring subscription bills into forecast commitments.

    Bills that are not subscriptions, or have no recurrence, are skipped.
    Amounts are always treated as outflows.
    """
    return [
        Recurring(
            label=bill.label,
            amount=-abs(bill.amount),
            cadence=cadence_for(bill.recurrence),
            next_date=bill.date,
        )
        for bill in bills
        if bill.is_subscription and bill.recurrence
    ]
