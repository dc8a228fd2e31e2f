"""Domain models - pure Python dataclasses representing cash-flow entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional


class Cadence(str, Enum):
    """Repeat interval of a recurring cash flow"""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    FOURWEEKLY = "fourweekly"
    MONTHLY = "monthly"


class PurchaseTiming(str, Enum):
    """When a wishlist purchase is planned (informational only)"""

    NOW = "now"
    MIDMONTH = "midmonth"
    MONTHEND = "monthend"


class RiskTag(str, Enum):
    HEAVY_BILLS = "heavy_bills"
    OVERSPEND_TREND = "overspend_trend"


class Verdict(str, Enum):
    """Three-level affordability classification"""

    GREEN = "green"
    AMBER = "amber"
    RED = "red"


@dataclass
class Transaction:
    """Single ledger record; negative amount = outflow, positive = inflow"""

    id: str
    date: datetime  # naive UTC
    amount: float
    category: str
    merchant: Optional[str] = None
    is_subscription: bool = False


@dataclass
class Recurring:
    """Scheduled, repeating cash-flow commitment (negative = bill, positive = income)"""

    label: str
    amount: float
    cadence: Cadence
    next_date: date


@dataclass
class WishItem:
    """Candidate purchase under evaluation"""

    label: str
    price: float
    when: Optional[PurchaseTiming] = None


@dataclass
class ForecastResult:
    """Energy bar: end-of-month projection plus risk tags"""

    safe_to_spend: float
    projected_eom: float
    committed: float
    variable_to_month_end: float
    days_left: int
    risk: List[RiskTag] = field(default_factory=list)


@dataclass
class AffordabilityResult:
    """Before/after forecasts for a wishlist and the resulting verdict"""

    before: ForecastResult
    after: ForecastResult
    total: float
    verdict: Verdict
    suggestions: List[str] = field(default_factory=list)


@dataclass
class CategorySpend:
    category: str
    this_month: float
    last_month: Optional[float] = None


@dataclass
class CohortStats:
    """Peer spend distribution for a category"""

    category: str
    median: float
    p75: float


@dataclass
class Insight:
    title: str
    body: str


@dataclass
class UpcomingBill:
    """Bill expected to post soon, as reported by the bank data layer"""

    id: str
    label: str
    date: date
    amount: float
    category: str
    is_subscription: bool = False
    recurrence: Optional[str] = None


@dataclass
class AccountSnapshot:
    """Everything the engine needs for one user, fetched in one go"""

    balance: float
    transactions: List[Transaction] = field(default_factory=list)
    upcoming_bills: List[UpcomingBill] = field(default_factory=list)
