"""Peer cohort comparison - surfaces categories where spend stands out"""

from typing import Dict, List
from cashflow_coach.domain.models import CategorySpend, CohortStats, Insight
from cashflow_coach.utils.money import round_half_up

MAX_INSIGHTS = 3

PEER_DEVIATION_PCT = 15.0
PEER_DEVIATION_FLOOR = 40.0  # ignore trivial categories

TREND_RATIO = 1.25
TREND_FLOOR = 60.0
SOFT_CAP_RATIO = 0.9


def compare_to_cohort(my: List[CategorySpend], cohort: List[CohortStats]) -> List[Insight]:
    """
    Compare per-category spend with peer medians and with last month.

    Two independent checks run per category:
    - deviation: more than 15% above the peer median and over 40 spent
    - trend: more than 25% above last month and over 60 spent

    Categories without peer stats are skipped. Insights keep category order
    and are capped at 3, not ranked by size.
    """
    peers: Dict[str, CohortStats] = {}
    for stats in cohort:
        peers.setdefault(stats.category, stats)

    insights: List[Insight] = []

    for spend in my:
        peer = peers.get(spend.category)
        if peer is None:
            continue

        diff = spend.this_month - peer.median
        pct = (diff / peer.median) * 100 if peer.median else 0.0

        if pct > PEER_DEVIATION_PCT and spend.this_month > PEER_DEVIATION_FLOOR:
            saving = round_half_up(diff / 2)
            insights.append(
                Insight(
                    title=f"{spend.category}: +{round_half_up(pct)}% vs peers",
                    body=(
                        f"Reducing £{saving} this month (e.g., one fewer order/week) "
                        f"could save ~£{saving}."
                    ),
                )
            )

        last_month = spend.last_month
        if last_month and spend.this_month > last_month * TREND_RATIO and spend.this_month > TREND_FLOOR:
            insights.append(
                Insight(
                    title=f"{spend.category} trending up",
                    body=(
                        f"Up from £{round_half_up(last_month)} → £{round_half_up(spend.this_month)}. "
                        f"Consider a soft cap of £{round_half_up(spend.this_month * SOFT_CAP_RATIO)} next month."
                    ),
                )
            )

    return insights[:MAX_INSIGHTS]
