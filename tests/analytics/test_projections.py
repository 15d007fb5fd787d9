"""Tests for cash-flow projection."""

from datetime import date
from decimal import Decimal

import pytest

from analytics.projections import (
    applied_income_rate,
    applied_outcome_rate,
    average_growth,
    generate_predictions,
)
from tests.helpers import make_monthly

TODAY = date(2024, 6, 10)


class TestAverageGrowth:
    """Tests for average_growth function."""

    def test_mean_of_pairs(self):
        # +10% then -10%
        growth = average_growth([Decimal("100"), Decimal("110"), Decimal("99")])
        assert growth == Decimal("0")

    def test_zero_previous_counts_as_no_growth(self):
        """Test that a zero previous month adds 0 instead of dividing by zero."""
        growth = average_growth([Decimal("0"), Decimal("100"), Decimal("110")])
        assert growth == Decimal("0.05")

    def test_all_zero(self):
        assert average_growth([Decimal("0")] * 3) == Decimal("0")


class TestAppliedRates:
    """Tests for the growth rate clamps."""

    @pytest.mark.parametrize(
        "growth, expected",
        [
            (Decimal("0.20"), Decimal("0.05")),
            (Decimal("0.01"), Decimal("0.01")),
            (Decimal("-0.40"), Decimal("-0.40")),
        ],
    )
    def test_income_capped_without_floor(self, growth, expected):
        assert applied_income_rate(growth) == expected

    @pytest.mark.parametrize(
        "growth, expected",
        [
            (Decimal("0.20"), Decimal("0.03")),
            (Decimal("0.01"), Decimal("0.01")),
            (Decimal("-0.40"), Decimal("-0.02")),
        ],
    )
    def test_outcome_collared(self, growth, expected):
        assert applied_outcome_rate(growth) == expected


class TestGeneratePredictions:
    """Tests for generate_predictions function."""

    @pytest.mark.parametrize("months", [0, 1, 2])
    def test_fewer_than_three_months(self, months):
        monthly = make_monthly(
            [(f"2024-0{i + 1}", 1000, 500) for i in range(months)]
        )
        assert generate_predictions(monthly, today=TODAY) == []

    def test_six_points_with_advancing_keys(self):
        monthly = make_monthly(
            [("2024-01", 1000, 500), ("2024-02", 1000, 500), ("2024-03", 1000, 500)]
        )

        predictions = generate_predictions(monthly, today=TODAY)

        assert len(predictions) == 6
        keys = [p.month_key for p in predictions]
        assert keys == sorted(keys)
        assert len(set(keys)) == 6
        assert all(p.is_prediction for p in predictions)

    def test_keys_anchor_on_today_not_last_data_month(self):
        """Test that projected months count forward from today."""
        monthly = make_monthly(
            [("2023-01", 1000, 500), ("2023-02", 1000, 500), ("2023-03", 1000, 500)]
        )

        predictions = generate_predictions(monthly, today=date(2024, 11, 30))

        assert [p.month_key for p in predictions] == [
            "2024-12",
            "2025-01",
            "2025-02",
            "2025-03",
            "2025-04",
            "2025-05",
        ]
        assert predictions[0].label == "Dec 2024"

    def test_month_end_anchor_does_not_skip_months(self):
        monthly = make_monthly(
            [("2024-01", 1, 1), ("2024-02", 1, 1), ("2024-03", 1, 1)]
        )

        predictions = generate_predictions(monthly, today=date(2024, 1, 31))

        assert [p.month_key for p in predictions][:2] == ["2024-02", "2024-03"]

    def test_flat_history_projects_flat(self):
        monthly = make_monthly(
            [("2024-01", 4000, 3000), ("2024-02", 4000, 3000), ("2024-03", 4000, 3000)]
        )

        predictions = generate_predictions(monthly, today=TODAY)

        assert all(p.income == Decimal("4000") for p in predictions)
        assert all(p.outcome == Decimal("3000") for p in predictions)

    def test_compounds_on_previous_projection(self):
        """Test growth capped at 5%/3% compounding from the last actual month."""
        monthly = make_monthly(
            [("2024-01", 1000, 1000), ("2024-02", 2000, 2000), ("2024-03", 4000, 4000)]
        )

        predictions = generate_predictions(monthly, today=TODAY)

        assert predictions[0].income == Decimal("4000") * Decimal("1.05")
        assert predictions[0].outcome == Decimal("4000") * Decimal("1.03")
        assert predictions[1].income == predictions[0].income * Decimal("1.05")
        assert predictions[5].income == Decimal("4000") * Decimal("1.05") ** 6

    def test_only_last_three_months_drive_the_trend(self):
        monthly = make_monthly(
            [
                ("2023-10", 10, 10),
                ("2023-11", 10000, 10000),
                ("2024-01", 1000, 1000),
                ("2024-02", 1000, 1000),
                ("2024-03", 1000, 1000),
            ]
        )

        predictions = generate_predictions(monthly, today=TODAY)

        assert predictions[0].income == Decimal("1000")
        assert predictions[0].outcome == Decimal("1000")

    def test_growth_stays_within_bounds(self):
        """Test that every step respects the caps, for rising and falling trends."""
        histories = [
            [("2024-01", 100, 100), ("2024-02", 300, 300), ("2024-03", 900, 900)],
            [("2024-01", 900, 900), ("2024-02", 300, 300), ("2024-03", 100, 100)],
        ]
        for rows in histories:
            monthly = make_monthly(rows)
            predictions = generate_predictions(monthly, today=TODAY)

            previous = monthly[-1]
            for point in predictions:
                income_growth = (point.income - previous.income) / previous.income
                outcome_growth = (point.outcome - previous.outcome) / previous.outcome
                assert income_growth <= Decimal("0.05")
                assert Decimal("-0.02") <= outcome_growth <= Decimal("0.03")
                assert point.income >= 0
                assert point.outcome >= 0
                previous = point

    def test_zero_income_month_does_not_raise(self):
        monthly = make_monthly(
            [("2024-01", 0, 100), ("2024-02", 0, 100), ("2024-03", 500, 100)]
        )

        predictions = generate_predictions(monthly, today=TODAY)

        assert len(predictions) == 6
        assert predictions[0].income == Decimal("500")

    def test_defaults_to_current_date(self):
        monthly = make_monthly(
            [("2024-01", 1, 1), ("2024-02", 1, 1), ("2024-03", 1, 1)]
        )

        predictions = generate_predictions(monthly)

        today = date.today()
        expected_first = (
            f"{today.year + 1}-01"
            if today.month == 12
            else f"{today.year}-{today.month + 1:02d}"
        )
        assert predictions[0].month_key == expected_first
