"""Unit tests for micro-insight heuristics"""

from datetime import datetime, timedelta
from cashflow_coach.domain.models import Transaction
from cashflow_coach.domain.insights import (
    days_since_last_use,
    generate_micro_insights,
    round_up_potential,
    weekend_split,
)

MONDAY = datetime(2026, 10, 12, 12, 0)
SATURDAY = datetime(2026, 10, 10, 12, 0)


def _txn(when: datetime, amount: float, merchant: str = "Shop", subscription: bool = False) -> Transaction:
    return Transaction(
        id=f"{merchant}_{when.isoformat()}_{amount}",
        date=when,
        amount=amount,
        category="test",
        merchant=merchant,
        is_subscription=subscription,
    )


def test_unused_subscription_never_used(today):
    """Test a subscription with no usage at the merchant reports 999 days"""
    insights = generate_micro_insights([_txn(MONDAY, -15.99, "Netflix", subscription=True)], today)

    assert insights == ["You haven't used Netflix in 999 days. Consider pausing."]


def test_unused_subscription_stale_usage(today):
    """Test usage more than 60 days ago is reported with the gap"""
    transactions = [
        _txn(MONDAY, -29.99, "PureGym", subscription=True),
        _txn(datetime(2026, 8, 1, 12, 0), -4.00, "PureGym"),
    ]

    insights = generate_micro_insights(transactions, today)

    assert insights == ["You haven't used PureGym in 75 days. Consider pausing."]


def test_unused_subscription_recent_usage(today):
    """Test a subscription used within 60 days is left alone"""
    transactions = [
        _txn(MONDAY, -10.99, "Spotify", subscription=True),
        _txn(today - timedelta(days=60), -2.00, "Spotify"),
    ]

    assert generate_micro_insights(transactions, today) == []


def test_days_since_last_use_ignores_refunds_and_other_merchants(today):
    """Test only outflows at the same merchant count as usage"""
    sub = _txn(MONDAY, -8.99, "Disney+", subscription=True)
    transactions = [
        sub,
        _txn(today - timedelta(days=5), 8.99, "Disney+"),  # refund
        _txn(today - timedelta(days=3), -20.00, "Cinema"),
        _txn(today - timedelta(days=90), -3.49, "Disney+"),
    ]

    assert days_since_last_use(sub, transactions, today) == 90


def test_round_up_potential_whole_amounts_count_one_each():
    """Test whole-unit outflows still contribute a full unit"""
    assert round_up_potential([_txn(MONDAY, -5.00), _txn(MONDAY, -2.75)]) == 1.25


def test_round_ups_exactly_ten_do_not_fire(today):
    """Test the round-up threshold is strict"""
    transactions = [_txn(MONDAY, -0.50) for _ in range(20)]

    assert round_up_potential(transactions) == 10.0
    assert generate_micro_insights(transactions, today) == []


def test_round_ups_just_over_ten_fire(today):
    """Test 10.01 of spare change produces the message"""
    transactions = [_txn(MONDAY, -0.50) for _ in range(20)] + [_txn(MONDAY, -0.99)]

    assert generate_micro_insights(transactions, today) == ["Round-ups could add ~£10.01 this month."]


def test_round_ups_ignore_income(today):
    """Test inflows never contribute spare change"""
    transactions = [_txn(MONDAY, 0.50) for _ in range(40)]
    assert generate_micro_insights(transactions, today) == []


def test_weekend_split_saturday_and_sunday():
    """Test Saturday and Sunday count as weekend"""
    sunday = datetime(2026, 10, 11, 12, 0)
    friday = datetime(2026, 10, 9, 12, 0)

    weekend, weekday = weekend_split([_txn(SATURDAY, -10.00), _txn(sunday, -20.00), _txn(friday, -5.00)])

    assert weekend == 30.00
    assert weekday == 5.00


def test_weekend_skew(today):
    """Test weekend spend over 1.5x weekdays is flagged with the ratio"""
    transactions = [_txn(SATURDAY, -300.00), _txn(MONDAY, -100.00)]

    insights = generate_micro_insights(transactions, today)

    assert insights == ["Weekend spend is 300% of weekdays. Plan ahead to avoid overspend."]


def test_weekend_skew_needs_weekday_spend(today):
    """Test weekend-only history is not compared against zero"""
    assert generate_micro_insights([_txn(SATURDAY, -300.00)], today) == []


def test_weekend_skew_at_ratio_does_not_fire(today):
    """Test exactly 1.5x weekday spend is not a skew"""
    transactions = [_txn(SATURDAY, -150.00), _txn(MONDAY, -100.00)]
    assert generate_micro_insights(transactions, today) == []


def test_all_heuristics_in_fixed_order(today):
    """Test subscriptions, then round-ups, then weekend skew"""
    transactions = (
        [_txn(MONDAY, -15.99, "Netflix", subscription=True)]
        + [_txn(datetime(2026, 10, 5, 12, 0), -0.50) for _ in range(30)]
        + [_txn(SATURDAY, -500.00)]
    )

    insights = generate_micro_insights(transactions, today)

    assert len(insights) == 3
    assert insights[0] == "You haven't used Netflix in 999 days. Consider pausing."
    assert insights[1].startswith("Round-ups could add ~£16.01")
    assert insights[2].startswith("Weekend spend is")


def test_micro_insights_capped_at_three(today):
    """Test extra insights beyond the first 3 are dropped"""
    transactions = (
        [
            _txn(MONDAY, -15.99, "Netflix", subscription=True),
            _txn(MONDAY, -10.99, "Spotify", subscription=True),
        ]
        + [_txn(datetime(2026, 10, 5, 12, 0), -0.50) for _ in range(30)]
        + [_txn(SATURDAY, -500.00)]
    )

    insights = generate_micro_insights(transactions, today)

    assert len(insights) == 3
    assert "Netflix" in insights[0]
    assert "Spotify" in insights[1]
    assert insights[2].startswith("Round-ups")


def test_micro_insights_empty(today):
    assert generate_micro_insights([], today) == []


def test_unused_subscription_without_merchant_is_skipped(today):
    """Test a subscription with no merchant name produces no nudge"""
    transactions = [_txn(MONDAY, -9.99, merchant=None, subscription=True)]
    assert generate_micro_insights(transactions, today) == []
