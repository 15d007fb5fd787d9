"""Run every analysis over one transaction list."""

import logging
from datetime import date
from typing import Iterable, Optional

from analytics.categories import aggregate_by_category
from analytics.insights import generate_insights
from analytics.monthly import aggregate_by_month
from analytics.projections import generate_predictions
from analytics.subscriptions import identify_subscriptions
from models.analysis import AnalysisResult
from models.transaction import Transaction

logger = logging.getLogger(__name__)


def analyze(
    transactions: Iterable[Transaction], today: Optional[date] = None
) -> AnalysisResult:
    """Compute the monthly, category, subscription, projection and insight views.

    The three aggregations run independently over the transactions; the
    projection uses the monthly aggregates and the insights use all of them.

    Args:
        transactions: Transactions to analyze. The input is not modified.
        today: Anchor for projected month keys. Defaults to date.today().

    Returns:
        AnalysisResult holding all five views.
    """
    transactions = list(transactions)

    monthly = aggregate_by_month(transactions)
    categories = aggregate_by_category(transactions)
    subscriptions = identify_subscriptions(transactions)
    predictions = generate_predictions(monthly, today=today)
    insights = generate_insights(transactions, monthly, subscriptions)

    logger.debug(
        f"Analyzed {len(transactions)} transactions: {len(monthly)} months, "
        f"{len(categories)} categories, {len(subscriptions)} subscriptions, "
        f"{len(predictions)} predictions, {len(insights)} insights"
    )

    return AnalysisResult(
        monthly=monthly,
        categories=categories,
        subscriptions=subscriptions,
        predictions=predictions,
        insights=insights,
    )
