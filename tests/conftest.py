"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime
from fastapi.testclient import TestClient
from cashflow_coach.api.main import create_app
from cashflow_coach.domain.models import AccountSnapshot, Transaction, UpcomingBill


# Thursday, 16 days before the end of October
TODAY = datetime(2026, 10, 15, 12, 0)


@pytest.fixture
def today() -> datetime:
    return TODAY


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Half a month of activity ending just before TODAY"""
    return [
        Transaction("t1", datetime(2026, 10, 1, 9, 0), 2500.00, "income", "Employer"),
        Transaction("t2", datetime(2026, 10, 2, 18, 30), -300.00, "groceries", "Tesco"),
        Transaction("t3", datetime(2026, 10, 3, 8, 0), -15.99, "entertainment", "Netflix", is_subscription=True),
        Transaction("t4", datetime(2026, 10, 10, 20, 0), -60.00, "eating out", "Dishoom"),
        Transaction("t5", datetime(2026, 10, 13, 13, 15), -90.00, "groceries", "Tesco"),
    ]


@pytest.fixture
def sample_snapshot(sample_transactions: list[Transaction]) -> AccountSnapshot:
    """Bank snapshot with one recurring subscription bill and one plain bill"""
    return AccountSnapshot(
        balance=1000.00,
        transactions=sample_transactions,
        upcoming_bills=[
            UpcomingBill("b1", "Gym", date(2026, 10, 20), 40.00, "Bills", is_subscription=True, recurrence="monthly"),
            UpcomingBill("b2", "Council tax", date(2026, 10, 22), 150.00, "Bills"),
        ],
    )
