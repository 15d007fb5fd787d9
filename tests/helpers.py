"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from itertools import count
from typing import List, Optional

from models.aggregate import MonthlyAggregate
from models.transaction import Transaction

_ids = count(1)


def make_transaction(
    amount="10.00",
    type="expense",
    transaction_date: date = date(2024, 1, 15),
    merchant: str = "Corner Store",
    category: str = "Shopping",
    is_recurring: bool = False,
    logo: Optional[str] = None,
    id: Optional[str] = None,
) -> Transaction:
    """Build a Transaction with sensible defaults."""
    return Transaction(
        id=id or f"txn_{next(_ids)}",
        merchant=merchant,
        category=category,
        amount=Decimal(str(amount)),
        type=type,
        transaction_date=transaction_date,
        is_recurring=is_recurring,
        logo=logo,
    )


def make_monthly(rows) -> List[MonthlyAggregate]:
    """Build monthly aggregates from (month_key, income, outcome) rows."""
    return [
        MonthlyAggregate(
            month_key=key,
            income=Decimal(str(income)),
            outcome=Decimal(str(outcome)),
            label=key,
        )
        for key, income, outcome in rows
    ]
