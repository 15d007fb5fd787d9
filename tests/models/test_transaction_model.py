"""Tests for the Transaction model."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from models.transaction import Transaction, parse_date
from tests.helpers import make_transaction


class TestTransaction:
    """Tests for Transaction construction."""

    def test_rejects_negative_amount(self):
        with pytest.raises(ValueError, match="non-negative"):
            make_transaction("-1.00")

    def test_rejects_nan_amount(self):
        with pytest.raises(ValueError):
            make_transaction("NaN")

    @pytest.mark.parametrize("amount", [5, 5.0, "5.00", None])
    def test_rejects_non_decimal_amount(self, amount):
        with pytest.raises(ValueError, match="must be a Decimal"):
            Transaction(
                id="txn_1",
                merchant="Corner Store",
                category="Shopping",
                amount=amount,
                type="expense",
                transaction_date=date(2024, 1, 15),
            )

    def test_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="Invalid transaction type: transfer"):
            make_transaction(type="transfer")

    def test_zero_amount_allowed(self):
        assert make_transaction("0").amount == Decimal("0")

    def test_is_immutable(self):
        transaction = make_transaction()
        with pytest.raises(FrozenInstanceError):
            transaction.amount = Decimal("1")

    def test_is_income(self):
        assert make_transaction(type="income").is_income is True
        assert make_transaction(type="subscription").is_income is False


class TestFromDict:
    """Tests for Transaction.from_dict and to_dict."""

    def test_parses_native_record(self):
        transaction = Transaction.from_dict(
            {
                "id": "txn_12",
                "merchant": "Netflix",
                "category": "Entertainment",
                "amount": 15.99,
                "type": "subscription",
                "date": "2024-03-02T00:00:00.000Z",
                "isRecurring": True,
                "logo": "🎬",
            }
        )

        assert transaction.id == "txn_12"
        assert transaction.amount == Decimal("15.99")
        assert transaction.transaction_date == datetime(2024, 3, 2, tzinfo=timezone.utc)
        assert transaction.is_recurring is True
        assert transaction.logo == "🎬"

    def test_optional_fields_default(self):
        transaction = Transaction.from_dict(
            {
                "id": 7,
                "merchant": "Target",
                "category": "Shopping",
                "amount": "42.10",
                "type": "expense",
                "date": "2024-03-02",
            }
        )

        assert transaction.id == "7"
        assert transaction.transaction_date == date(2024, 3, 2)
        assert transaction.is_recurring is False
        assert transaction.logo is None

    def test_missing_fields(self):
        with pytest.raises(ValueError, match="Missing transaction fields: category, date"):
            Transaction.from_dict(
                {"id": "1", "merchant": "X", "amount": 1, "type": "expense"}
            )

    def test_invalid_amount(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            Transaction.from_dict(
                {
                    "id": "1",
                    "merchant": "X",
                    "category": "Y",
                    "amount": "lots",
                    "type": "expense",
                    "date": "2024-01-01",
                }
            )

    def test_to_dict_round_trip(self):
        original = make_transaction(
            "9.99", type="subscription", is_recurring=True, logo="🎵", id="txn_1"
        )

        assert Transaction.from_dict(original.to_dict()) == original


class TestParseDate:
    """Tests for parse_date function."""

    def test_plain_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    def test_passthrough(self):
        value = date(2024, 1, 1)
        assert parse_date(value) is value

    @pytest.mark.parametrize("value", ["yesterday", "", 20240101, None])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date(value)
