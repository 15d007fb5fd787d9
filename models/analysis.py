from dataclasses import dataclass, field
from typing import List

from models.aggregate import CategoryAggregate, MonthlyAggregate
from models.insight import Insight
from models.prediction import PredictionPoint
from models.subscription import SubscriptionRecord


@dataclass
class AnalysisResult:
    """The five derived views of one transaction list."""

    monthly: List[MonthlyAggregate] = field(default_factory=list)
    categories: List[CategoryAggregate] = field(default_factory=list)
    subscriptions: List[SubscriptionRecord] = field(default_factory=list)
    predictions: List[PredictionPoint] = field(default_factory=list)
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "monthly": [m.to_dict() for m in self.monthly],
            "categories": [c.to_dict() for c in self.categories],
            "subscriptions": [s.to_dict() for s in self.subscriptions],
            "predictions": [p.to_dict() for p in self.predictions],
            "insights": [i.to_dict() for i in self.insights],
        }
