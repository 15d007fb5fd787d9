"""Natural-language insights derived from the aggregates."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from analytics.categories import aggregate_by_category
from models.aggregate import MonthlyAggregate
from models.insight import Insight
from models.subscription import SubscriptionRecord
from models.transaction import Transaction

logger = logging.getLogger(__name__)

STRONG_SAVINGS_RATE = Decimal("20")
MODERATE_SAVINGS_RATE = Decimal("10")
SPENDING_SPIKE_PERCENT = Decimal("10")
SPENDING_REDUCTION_PERCENT = Decimal("-5")

_ONE_DECIMAL = Decimal("0.1")


def _percent(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator * 100, rounded half-up to one decimal place."""
    return (numerator / denominator * 100).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def savings_rate(monthly: Sequence[MonthlyAggregate]) -> Decimal:
    """Share of total income not spent, as a percentage to one decimal.

    Returns 0.0 when there is no income at all.
    """
    total_income = sum((m.income for m in monthly), Decimal("0"))
    total_outcome = sum((m.outcome for m in monthly), Decimal("0"))

    if total_income == 0:
        logger.debug("No income recorded, reporting a savings rate of 0.0")
        return Decimal("0.0")

    return _percent(total_income - total_outcome, total_income)


def spending_change(monthly: Sequence[MonthlyAggregate]) -> Optional[Decimal]:
    """Percent change in outcome between the last two months.

    Returns None when there are fewer than two months or the earlier month
    has no outcome to compare against.
    """
    if len(monthly) < 2:
        return None

    previous = monthly[-2].outcome
    current = monthly[-1].outcome
    if previous == 0:
        logger.debug(f"No outcome in {monthly[-2].month_key}, skipping spending trend")
        return None

    return _percent(current - previous, previous)


def savings_insight(rate: Decimal) -> Insight:
    if rate > STRONG_SAVINGS_RATE:
        return Insight(
            type="positive",
            title="Strong Savings Rate",
            message=(
                f"You're saving {rate}% of your income. "
                "This is above the recommended 20% threshold."
            ),
            icon="💪",
        )
    if rate > MODERATE_SAVINGS_RATE:
        return Insight(
            type="neutral",
            title="Moderate Savings",
            message=(
                f"Your savings rate is {rate}%. "
                "Consider small expense reductions to reach the 20% goal."
            ),
            icon="📊",
        )
    return Insight(
        type="warning",
        title="Low Savings Alert",
        message=(
            f"Your savings rate is only {rate}%. "
            "Review subscriptions and discretionary spending."
        ),
        icon="⚠️",
    )


def subscription_insight(
    subscriptions: Sequence[SubscriptionRecord],
) -> Optional[Insight]:
    zombies = [s for s in subscriptions if s.is_zombie]
    if not zombies:
        return None

    potential_savings = sum((s.annual_spend for s in zombies), Decimal("0"))
    return Insight(
        type="suggestion",
        title="Subscription Optimization",
        message=(
            f"Found {len(zombies)} underutilized subscriptions. "
            f"You could save up to ${potential_savings:.2f}/year."
        ),
        icon="🧟",
    )


def spending_trend_insight(change: Optional[Decimal]) -> Optional[Insight]:
    if change is None:
        return None

    if change > SPENDING_SPIKE_PERCENT:
        return Insight(
            type="warning",
            title="Spending Spike Detected",
            message=(
                f"Your spending increased {change}% compared to last month. "
                "Check for unusual expenses."
            ),
            icon="📈",
        )
    if change < SPENDING_REDUCTION_PERCENT:
        return Insight(
            type="positive",
            title="Spending Reduction",
            message=f"Great job! You reduced spending by {abs(change)}% this month.",
            icon="🎯",
        )
    return None


def top_category_insight(transactions: Sequence[Transaction]) -> Optional[Insight]:
    categories = aggregate_by_category(transactions)
    if not categories:
        return None

    top = categories[0]
    return Insight(
        type="info",
        title="Top Spending Category",
        message=(
            f"{top.category} accounts for ${top.amount:.2f} of your expenses "
            f"across {top.count} transactions."
        ),
        icon="🏷️",
    )


def generate_insights(
    transactions: Sequence[Transaction],
    monthly: Sequence[MonthlyAggregate],
    subscriptions: Sequence[SubscriptionRecord],
) -> List[Insight]:
    """Produce the ordered list of insights for display.

    The order is fixed: savings rate, zombie subscriptions, spending trend,
    top category. Every slot but the first is skipped when it has nothing to
    report; the savings slot is skipped only when there is no monthly data.

    Args:
        transactions: The transactions behind the aggregates.
        monthly: Output of aggregate_by_month for the same transactions.
        subscriptions: Output of identify_subscriptions for the same transactions.

    Returns:
        List of Insight objects, top to bottom.
    """
    insights = []

    if monthly:
        insights.append(savings_insight(savings_rate(monthly)))

    candidates = [
        subscription_insight(subscriptions),
        spending_trend_insight(spending_change(monthly)),
        top_category_insight(transactions),
    ]
    insights.extend(insight for insight in candidates if insight is not None)

    return insights
