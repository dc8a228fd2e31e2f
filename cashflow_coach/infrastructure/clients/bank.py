"""Bank API HTTP client for fetching balances, transactions, and upcoming bills"""

import httpx
from datetime import date, datetime
from typing import Any, Dict, List
from cashflow_coach.domain.models import AccountSnapshot, Transaction, UpcomingBill
from cashflow_coach.domain.exceptions import BankAPIError
from cashflow_coach.utils.date_utils import to_naive_utc
from cashflow_coach.config import settings


def parse_transaction(txn: Dict[str, Any]) -> Transaction:
    return Transaction(
        id=str(txn["id"]),
        date=to_naive_utc(datetime.fromisoformat(txn["date"])),
        amount=float(txn["amount"]),
        category=txn["category"],
        merchant=txn.get("merchant"),
        is_subscription=bool(txn.get("is_subscription", False)),
    )


def parse_upcoming_bill(bill: Dict[str, Any]) -> UpcomingBill:
    return UpcomingBill(
        id=str(bill["id"]),
        label=bill["label"],
        date=date.fromisoformat(bill["date"]),
        amount=float(bill["amount"]),
        category=bill.get("category", "Bills"),
        is_subscription=bool(bill.get("is_subscription", False)),
        recurrence=bill.get("recurrence"),
    )


class BankClient:
    """Client for external bank account API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.bank_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_account_snapshot(self, user_id: str) -> AccountSnapshot:
        """
        Fetch current balance, transaction history, and upcoming bills for a user.

        The balance is the sum of every account's current balance.

        Raises:
            BankAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/bank/accounts/{user_id}/snapshot")
                response.raise_for_status()
                data = response.json()

                balance = sum(float(account.get("current") or 0) for account in data.get("accounts", []))
                transactions: List[Transaction] = [
                    parse_transaction(txn) for txn in data.get("transactions", [])
                ]
                bills: List[UpcomingBill] = [
                    parse_upcoming_bill(bill) for bill in data.get("upcoming_bills", [])
                ]

                return AccountSnapshot(balance=balance, transactions=transactions, upcoming_bills=bills)

            except httpx.TimeoutException as e:
                raise BankAPIError(f"Bank API timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                raise BankAPIError(f"Bank API unreachable: {e}") from e
            except httpx.HTTPStatusError as e:
                raise BankAPIError(f"Bank API error: {e.response.status_code}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise BankAPIError(f"Invalid account data from bank: {e}") from e
