"""Subscription model for recurring merchants."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Union


@dataclass
class SubscriptionRecord:
    """A merchant charged on a recurring basis.

    Attributes:
        merchant: Merchant name (exact match grouping key).
        category: Category of the last transaction seen for the merchant.
        monthly_spend: Amount of the last transaction seen for the merchant.
        annual_spend: monthly_spend * 12.
        occurrences: Number of recurring transactions for the merchant.
        dates: Every observed transaction date, in input order.
        potential_savings: annual_spend when occurrences < 4, else 0.
        is_zombie: True when the subscription looks underused.
        logo: Display glyph.
    """

    merchant: str
    category: str
    monthly_spend: Decimal
    annual_spend: Decimal
    occurrences: int
    potential_savings: Decimal
    is_zombie: bool
    dates: List[Union[date, datetime]] = field(default_factory=list)
    logo: str = "💳"

    def to_dict(self) -> dict:
        return {
            "merchant": self.merchant,
            "category": self.category,
            "monthlySpend": float(self.monthly_spend),
            "annualSpend": float(self.annual_spend),
            "occurrences": self.occurrences,
            "dates": [d.isoformat() for d in self.dates],
            "potentialSavings": float(self.potential_savings),
            "isZombie": self.is_zombie,
            "logo": self.logo,
        }
