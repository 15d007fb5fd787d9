"""Transaction analytics: aggregation, subscription detection, projection and insights."""

from analytics.categories import aggregate_by_category
from analytics.engine import analyze
from analytics.insights import generate_insights
from analytics.monthly import aggregate_by_month
from analytics.projections import generate_predictions
from analytics.subscriptions import identify_subscriptions

__all__ = [
    "aggregate_by_category",
    "aggregate_by_month",
    "analyze",
    "generate_insights",
    "generate_predictions",
    "identify_subscriptions",
]
