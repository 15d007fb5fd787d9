"""Synthetic transaction history for demos.

Generates six months of salary, occasional extra income, catalogue
subscriptions and everyday expenses, ending in the current month.
"""

import random
from datetime import date
from decimal import Decimal
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from models.transaction import EXPENSE, INCOME, SUBSCRIPTION, Transaction

MOCK_MONTHS = 6

INCOME_MERCHANTS = [
    ("Acme Corp Payroll", "Salary"),
    ("Freelance Payment", "Freelance"),
    ("Investment Dividend", "Investment"),
    ("Side Project Revenue", "Business"),
]

SUBSCRIPTION_MERCHANTS = [
    ("Netflix", "Entertainment", "15.99", "🎬"),
    ("Spotify", "Entertainment", "9.99", "🎵"),
    ("Adobe Creative Cloud", "Software", "54.99", "🎨"),
    ("Amazon Prime", "Shopping", "14.99", "📦"),
    ("Gym Membership", "Health", "49.99", "🏋️"),
    ("Cloud Storage Pro", "Software", "9.99", "☁️"),
    ("News Subscription", "Media", "12.99", "📰"),
    ("VPN Service", "Software", "11.99", "🔐"),
    ("Streaming Service+", "Entertainment", "8.99", "📺"),
    ("Password Manager", "Software", "4.99", "🔑"),
]

EXPENSE_MERCHANTS = [
    ("Whole Foods Market", "Groceries"),
    ("Shell Gas Station", "Transportation"),
    ("Uber", "Transportation"),
    ("Starbucks", "Dining"),
    ("Target", "Shopping"),
    ("Amazon", "Shopping"),
    ("Chipotle", "Dining"),
    ("CVS Pharmacy", "Health"),
    ("Home Depot", "Home"),
    ("Electric Company", "Utilities"),
    ("Water Utility", "Utilities"),
    ("Internet Provider", "Utilities"),
    ("Restaurant", "Dining"),
    ("Coffee Shop", "Dining"),
    ("Clothing Store", "Shopping"),
]

# (low, high) spend range per expense category
EXPENSE_RANGES = {
    "Utilities": (50, 200),
    "Groceries": (30, 200),
    "Dining": (10, 80),
    "Transportation": (20, 100),
}
DEFAULT_EXPENSE_RANGE = (15, 150)

SALARY_RANGE = (4500, 6500)
EXTRA_INCOME_RANGE = (200, 1500)
SUBSCRIPTION_ACTIVE_CHANCE = 0.85
EXTRA_INCOME_CHANCE = 0.5
MIN_EXPENSES_PER_MONTH = 15
MAX_EXPENSES_PER_MONTH = 29


def _money(rng: random.Random, low: float, high: float) -> Decimal:
    return Decimal(str(round(rng.uniform(low, high), 2)))


def generate_mock_transactions(
    today: Optional[date] = None, rng: Optional[random.Random] = None
) -> List[Transaction]:
    """Generate a realistic six-month transaction history.

    Args:
        today: Last month of the history. Defaults to date.today().
        rng: Random source. Pass a seeded random.Random for repeatable data.

    Returns:
        Transactions sorted newest first, with ids "txn_1", "txn_2", ...
    """
    if today is None:
        today = date.today()
    if rng is None:
        rng = random.Random()

    transactions = []
    next_id = 1

    def add(**fields):
        nonlocal next_id
        transactions.append(Transaction(id=f"txn_{next_id}", **fields))
        next_id += 1

    for months_ago in range(MOCK_MONTHS):
        month_start = (today - relativedelta(months=months_ago)).replace(day=1)

        salary_merchant, salary_category = INCOME_MERCHANTS[0]
        add(
            merchant=salary_merchant,
            category=salary_category,
            amount=_money(rng, *SALARY_RANGE),
            type=INCOME,
            transaction_date=month_start.replace(day=15),
        )

        if rng.random() > EXTRA_INCOME_CHANCE:
            merchant, category = rng.choice(INCOME_MERCHANTS[1:])
            add(
                merchant=merchant,
                category=category,
                amount=_money(rng, *EXTRA_INCOME_RANGE),
                type=INCOME,
                transaction_date=month_start.replace(day=rng.randint(1, 27)),
            )

        for merchant, category, amount, logo in SUBSCRIPTION_MERCHANTS:
            if rng.random() > SUBSCRIPTION_ACTIVE_CHANCE:
                continue
            add(
                merchant=merchant,
                category=category,
                amount=Decimal(amount),
                type=SUBSCRIPTION,
                transaction_date=month_start.replace(day=rng.randint(1, 4)),
                is_recurring=True,
                logo=logo,
            )

        for _ in range(rng.randint(MIN_EXPENSES_PER_MONTH, MAX_EXPENSES_PER_MONTH)):
            merchant, category = rng.choice(EXPENSE_MERCHANTS)
            low, high = EXPENSE_RANGES.get(category, DEFAULT_EXPENSE_RANGE)
            add(
                merchant=merchant,
                category=category,
                amount=_money(rng, low, high),
                type=EXPENSE,
                transaction_date=month_start.replace(day=rng.randint(1, 27)),
            )

    transactions.sort(key=lambda t: t.transaction_date, reverse=True)
    return transactions
