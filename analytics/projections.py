"""Forward cash-flow projection from the recent monthly trend."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from analytics.monthly import month_key, month_label
from models.aggregate import MonthlyAggregate
from models.prediction import PredictionPoint

logger = logging.getLogger(__name__)

TREND_WINDOW_MONTHS = 3
PROJECTION_MONTHS = 6

MAX_INCOME_GROWTH = Decimal("0.05")
MAX_OUTCOME_GROWTH = Decimal("0.03")
MIN_OUTCOME_GROWTH = Decimal("-0.02")


def average_growth(values: Sequence[Decimal]) -> Decimal:
    """Mean month-over-month fractional growth across consecutive values.

    A pair whose previous value is zero has no defined growth and contributes
    0 to the mean.

    Args:
        values: At least two values, oldest first.

    Returns:
        Mean of (current - previous) / previous over the len(values) - 1 pairs.
    """
    total = Decimal("0")
    for previous, current in zip(values, values[1:]):
        if previous == 0:
            logger.debug("Previous month value is zero, treating growth as 0")
            continue
        total += (current - previous) / previous
    return total / (len(values) - 1)


def applied_income_rate(growth: Decimal) -> Decimal:
    """Cap income growth at +5% per month. There is no floor."""
    return min(growth, MAX_INCOME_GROWTH)


def applied_outcome_rate(growth: Decimal) -> Decimal:
    """Clamp outcome growth to [-2%, +3%] per month."""
    return max(min(growth, MAX_OUTCOME_GROWTH), MIN_OUTCOME_GROWTH)


def generate_predictions(
    monthly: Sequence[MonthlyAggregate], today: Optional[date] = None
) -> List[PredictionPoint]:
    """Extrapolate income and outcome six months forward.

    The growth rates are the clamped mean growth over the last three months
    and stay fixed for the whole horizon. The first projected month grows the
    last actual month; each later month compounds on the previous projection.

    Projected month keys count forward from ``today``, not from the last month
    present in the data.

    Args:
        monthly: Monthly aggregates sorted ascending by month.
        today: Anchor for the projected month keys. Defaults to date.today().

    Returns:
        Six PredictionPoints, or an empty list when fewer than three months of
        data are available.
    """
    if len(monthly) < TREND_WINDOW_MONTHS:
        return []

    if today is None:
        today = date.today()

    recent = monthly[-TREND_WINDOW_MONTHS:]
    income_rate = applied_income_rate(average_growth([m.income for m in recent]))
    outcome_rate = applied_outcome_rate(average_growth([m.outcome for m in recent]))

    logger.debug(
        f"Projecting {PROJECTION_MONTHS} months with income rate {income_rate}, "
        f"outcome rate {outcome_rate}"
    )

    income = monthly[-1].income
    outcome = monthly[-1].outcome
    predictions = []

    for offset in range(1, PROJECTION_MONTHS + 1):
        month_date = today + relativedelta(months=offset)
        income = income * (1 + income_rate)
        outcome = outcome * (1 + outcome_rate)

        predictions.append(
            PredictionPoint(
                month_key=month_key(month_date),
                income=income,
                outcome=outcome,
                label=month_label(month_date),
            )
        )

    return predictions
