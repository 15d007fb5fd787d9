"""Aggregate models produced by grouping transactions."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class MonthlyAggregate:
    """Cash flow for a single calendar month.

    Attributes:
        month_key: Zero-padded "YYYY-MM" key, sortable as a string.
        income: Sum of income amounts in the month.
        outcome: Sum of every non-income amount in the month.
        label: Short display string such as "Mar 2024".
    """

    month_key: str
    income: Decimal
    outcome: Decimal
    label: str

    def to_dict(self) -> dict:
        return {
            "month": self.month_key,
            "income": float(self.income),
            "outcome": float(self.outcome),
            "label": self.label,
        }


@dataclass
class CategoryAggregate:
    """Spending for a single category.

    Attributes:
        category: Category label, matched exactly.
        amount: Sum of non-income amounts in the category.
        count: Number of transactions in the category.
        color: Display color from the category color table.
    """

    category: str
    amount: Decimal
    count: int
    color: str

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "amount": float(self.amount),
            "count": self.count,
            "color": self.color,
        }
