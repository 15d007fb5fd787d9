from dataclasses import dataclass
from decimal import Decimal


@dataclass
class PredictionPoint:
    """Projected income and outcome for a future month."""

    month_key: str
    income: Decimal
    outcome: Decimal
    label: str
    is_prediction: bool = True

    def to_dict(self) -> dict:
        return {
            "month": self.month_key,
            "income": float(self.income),
            "outcome": float(self.outcome),
            "label": self.label,
            "isPrediction": self.is_prediction,
        }
