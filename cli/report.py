"""Shared report output for analysis commands."""

import json

from logger import get_logger
from models.analysis import AnalysisResult

logger = get_logger()


def print_json(result: AnalysisResult):
    """Print the analysis as a JSON document."""
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


def print_report(result: AnalysisResult):
    """Print the analysis as a human-readable report."""
    if not result.monthly:
        logger.info("No transactions to analyze.")
        return

    logger.info("\nMonthly Cash Flow:")
    logger.info("=" * 80)
    for month in result.monthly:
        logger.info(
            f"{month.label:<10} income ${month.income:>12,.2f}   "
            f"outcome ${month.outcome:>12,.2f}"
        )

    if result.predictions:
        logger.info("\nProjection:")
        logger.info("=" * 80)
        for point in result.predictions:
            logger.info(
                f"{point.label:<10} income ${point.income:>12,.2f}   "
                f"outcome ${point.outcome:>12,.2f}"
            )

    logger.info("\nSpending by Category:")
    logger.info("=" * 80)
    for category in result.categories:
        logger.info(
            f"{category.category:<20} ${category.amount:>12,.2f}   "
            f"({category.count} transactions)"
        )

    if result.subscriptions:
        logger.info("\nSubscriptions:")
        logger.info("=" * 80)
        for sub in result.subscriptions:
            flag = "  [zombie]" if sub.is_zombie else ""
            logger.info(
                f"{sub.logo} {sub.merchant:<25} ${sub.monthly_spend:>8,.2f}/mo   "
                f"${sub.annual_spend:>10,.2f}/yr   x{sub.occurrences}{flag}"
            )

    logger.info("\nInsights:")
    logger.info("=" * 80)
    for insight in result.insights:
        logger.info(f"{insight.icon} {insight.title} ({insight.type})")
        logger.info(f"  {insight.message}")
