"""Spend-by-category aggregation."""

from decimal import Decimal
from typing import Dict, Iterable, List

from models.aggregate import CategoryAggregate
from models.transaction import Transaction

CATEGORY_COLORS = {
    "Salary": "#10B981",
    "Freelance": "#34D399",
    "Investment": "#6EE7B7",
    "Business": "#059669",
    "Entertainment": "#8B5CF6",
    "Software": "#6366F1",
    "Shopping": "#EC4899",
    "Health": "#F97316",
    "Media": "#EAB308",
    "Groceries": "#22C55E",
    "Transportation": "#3B82F6",
    "Dining": "#F59E0B",
    "Home": "#A855F7",
    "Utilities": "#64748B",
}

DEFAULT_CATEGORY_COLOR = "#64748B"


def get_category_color(category: str) -> str:
    """Look up the display color of a category, falling back to neutral gray."""
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


def aggregate_by_category(
    transactions: Iterable[Transaction],
) -> List[CategoryAggregate]:
    """Sum non-income transactions per category.

    Categories are matched by exact string, so "Dining" and "dining" are
    separate groups.

    Args:
        transactions: Transactions to aggregate. Income is ignored.

    Returns:
        CategoryAggregate list sorted descending by amount. Categories with
        equal amounts keep the order in which they were first seen.
    """
    categories: Dict[str, CategoryAggregate] = {}

    for transaction in transactions:
        if transaction.is_income:
            continue

        if transaction.category not in categories:
            categories[transaction.category] = CategoryAggregate(
                category=transaction.category,
                amount=Decimal("0"),
                count=0,
                color=get_category_color(transaction.category),
            )

        categories[transaction.category].amount += transaction.amount
        categories[transaction.category].count += 1

    return sorted(categories.values(), key=lambda c: c.amount, reverse=True)
