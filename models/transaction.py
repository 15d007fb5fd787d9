from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from dateutil.parser import isoparse

INCOME = "income"
EXPENSE = "expense"
SUBSCRIPTION = "subscription"

TRANSACTION_TYPES = (INCOME, EXPENSE, SUBSCRIPTION)


@dataclass(frozen=True)
class Transaction:
    id: str
    merchant: str
    category: str
    amount: Decimal  # always non-negative, direction is carried by type
    type: str  # 'income', 'expense', or 'subscription'
    transaction_date: Union[date, datetime]
    is_recurring: bool = False
    logo: Optional[str] = None

    def __post_init__(self):
        if self.type not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid transaction type: {self.type}")
        if not isinstance(self.amount, Decimal):
            raise ValueError(f"Transaction amount must be a Decimal: {self.amount!r}")
        if not self.amount.is_finite() or self.amount < 0:
            raise ValueError(f"Transaction amount must be non-negative: {self.amount}")

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build a Transaction from its JSON representation.

        Raises:
            ValueError: If a required field is missing or cannot be parsed.
        """
        missing = [
            key
            for key in ("id", "merchant", "category", "amount", "type", "date")
            if data.get(key) is None
        ]
        if missing:
            raise ValueError(f"Missing transaction fields: {', '.join(missing)}")

        try:
            amount = Decimal(str(data["amount"]))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {data['amount']!r}")

        return cls(
            id=str(data["id"]),
            merchant=data["merchant"],
            category=data["category"],
            amount=amount,
            type=data["type"],
            transaction_date=parse_date(data["date"]),
            is_recurring=bool(data.get("isRecurring", False)),
            logo=data.get("logo"),
        )

    def to_dict(self) -> dict:
        """Convert transaction to its JSON representation."""
        return {
            "id": self.id,
            "merchant": self.merchant,
            "category": self.category,
            "amount": float(self.amount),
            "type": self.type,
            "date": self.transaction_date.isoformat(),
            "isRecurring": self.is_recurring,
            "logo": self.logo,
        }


def parse_date(value: Union[str, date, datetime]) -> Union[date, datetime]:
    """Parse an ISO-8601 date or date-time string.

    Plain dates ("2024-03-15") stay dates; anything with a time component
    becomes a datetime.
    """
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")
    try:
        parsed = isoparse(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid date: {value!r}")
    if len(value) == 10:
        return parsed.date()
    return parsed
