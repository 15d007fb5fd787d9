"""Recurring merchant detection and zombie subscription flagging."""

from decimal import Decimal
from typing import Dict, Iterable, List

from models.subscription import SubscriptionRecord
from models.transaction import SUBSCRIPTION, Transaction

DEFAULT_SUBSCRIPTION_LOGO = "💳"

# A subscription seen fewer than this many times is a zombie
ZOMBIE_MIN_OCCURRENCES = 3
ZOMBIE_CATEGORY = "Entertainment"
ZOMBIE_MONTHLY_SPEND_LIMIT = Decimal("20")

# Savings are counted below 4 occurrences, one more than the zombie threshold
SAVINGS_MIN_OCCURRENCES = 4

MONTHS_PER_YEAR = 12


def is_recurring_charge(transaction: Transaction) -> bool:
    """Check whether a transaction belongs to a recurring merchant."""
    return transaction.type == SUBSCRIPTION or transaction.is_recurring


def is_zombie(occurrences: int, category: str, monthly_spend: Decimal) -> bool:
    """Flag a subscription that is rarely charged or is costly entertainment."""
    return occurrences < ZOMBIE_MIN_OCCURRENCES or (
        category == ZOMBIE_CATEGORY and monthly_spend > ZOMBIE_MONTHLY_SPEND_LIMIT
    )


def identify_subscriptions(
    transactions: Iterable[Transaction],
) -> List[SubscriptionRecord]:
    """Group recurring charges by merchant and classify each merchant.

    A transaction is a recurring charge when its type is 'subscription' or it
    is marked as recurring.

    The monthly spend and category of a merchant are taken from the last
    transaction seen for that merchant in input order. This is deliberately
    not the latest by date: callers relying on a specific amount must order
    their input accordingly. The logo follows the same rule: the last
    non-empty logo seen for the merchant is kept, falling back to a card glyph.

    Args:
        transactions: Transactions to scan.

    Returns:
        SubscriptionRecord list sorted descending by annual spend.
    """
    merchants: Dict[str, dict] = {}

    for transaction in transactions:
        if not is_recurring_charge(transaction):
            continue

        entry = merchants.setdefault(
            transaction.merchant,
            {"occurrences": 0, "dates": [], "logo": DEFAULT_SUBSCRIPTION_LOGO},
        )
        entry["occurrences"] += 1
        entry["dates"].append(transaction.transaction_date)
        # Last one wins
        entry["category"] = transaction.category
        entry["amount"] = transaction.amount
        if transaction.logo:
            entry["logo"] = transaction.logo

    records = []
    for merchant, entry in merchants.items():
        monthly_spend = entry["amount"]
        annual_spend = monthly_spend * MONTHS_PER_YEAR
        occurrences = entry["occurrences"]

        records.append(
            SubscriptionRecord(
                merchant=merchant,
                category=entry["category"],
                monthly_spend=monthly_spend,
                annual_spend=annual_spend,
                occurrences=occurrences,
                potential_savings=(
                    annual_spend
                    if occurrences < SAVINGS_MIN_OCCURRENCES
                    else Decimal("0")
                ),
                is_zombie=is_zombie(occurrences, entry["category"], monthly_spend),
                dates=entry["dates"],
                logo=entry["logo"],
            )
        )

    return sorted(records, key=lambda r: r.annual_spend, reverse=True)
