"""Monthly cash-flow aggregation."""

from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List

from models.aggregate import MonthlyAggregate
from models.transaction import Transaction


def month_key(value: date) -> str:
    """Format the zero-padded "YYYY-MM" key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def month_label(value: date) -> str:
    """Format the short display label of a date, e.g. "Mar 2024"."""
    return value.strftime("%b %Y")


def aggregate_by_month(transactions: Iterable[Transaction]) -> List[MonthlyAggregate]:
    """Group transactions into calendar-month income and outcome totals.

    Income transactions count toward ``income``; every other type (expense or
    subscription, recurring or not) counts toward ``outcome``.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        One MonthlyAggregate per month present in the input, sorted ascending
        by month key. Empty input gives an empty list.

    Example:
        [
            MonthlyAggregate(month_key="2024-01", income=Decimal("5000"),
                             outcome=Decimal("3000"), label="Jan 2024"),
            MonthlyAggregate(month_key="2024-02", ...),
        ]
    """
    monthly: Dict[str, MonthlyAggregate] = {}

    for transaction in transactions:
        key = month_key(transaction.transaction_date)

        if key not in monthly:
            monthly[key] = MonthlyAggregate(
                month_key=key,
                income=Decimal("0"),
                outcome=Decimal("0"),
                label=month_label(transaction.transaction_date),
            )

        if transaction.is_income:
            monthly[key].income += transaction.amount
        else:
            monthly[key].outcome += transaction.amount

    # Zero padding makes the string order the calendar order
    return sorted(monthly.values(), key=lambda m: m.month_key)
