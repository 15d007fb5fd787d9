"""Shared pytest fixtures for all tests."""

from datetime import date

import pytest

from config import Config
from tests.helpers import make_transaction


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "ledgerlens",
        log_level="DEBUG",
        log_dir=tmp_path / "ledgerlens" / "logs",
        default_source="json",
    )


@pytest.fixture
def january_transactions():
    """One month of activity: a salary and eleven outgoing transactions.

    Income 5000, outcome 3000 split into Groceries 600, Dining 400 and
    Entertainment 2000. StreamFlix is a $25 subscription charged twice.
    """
    transactions = [
        make_transaction(
            "5000.00",
            type="income",
            transaction_date=date(2024, 1, 15),
            merchant="Acme Corp Payroll",
            category="Salary",
        ),
    ]
    for day in (3, 10, 17, 24):
        transactions.append(
            make_transaction(
                "150.00",
                transaction_date=date(2024, 1, day),
                merchant="Whole Foods Market",
                category="Groceries",
            )
        )
    for day in (5, 12, 19, 26):
        transactions.append(
            make_transaction(
                "100.00",
                transaction_date=date(2024, 1, day),
                merchant="Chipotle",
                category="Dining",
            )
        )
    for day in (1, 20):
        transactions.append(
            make_transaction(
                "25.00",
                type="subscription",
                transaction_date=date(2024, 1, day),
                merchant="StreamFlix",
                category="Entertainment",
                is_recurring=True,
            )
        )
    transactions.append(
        make_transaction(
            "1950.00",
            transaction_date=date(2024, 1, 27),
            merchant="Stadium Tickets",
            category="Entertainment",
        )
    )
    return transactions
